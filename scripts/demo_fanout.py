#!/usr/bin/env python3
"""Demo: one log call, two sinks.

Console gets WARN and above in a human-friendly format; a JSONL file gets
everything from DEBUG up. Run it, then:

  cat /tmp/multi_logger_demo.jsonl
"""

from __future__ import annotations

import logging
import os

os.environ.setdefault("MULTI_LOGGER_SINKS", "stderr:warn,jsonl:debug")
os.environ.setdefault("MULTI_LOGGER_FORMAT", "console")
os.environ.setdefault("MULTI_LOGGER_JSONL_PATH", "/tmp/multi_logger_demo.jsonl")

import multi_logger

# ── Config-driven ─────────────────────────────────────────────────
multi = multi_logger.configure()
log = logging.getLogger("demo")

log.debug("only in the file")
log.info("also only in the file")
log.warning("file and console")
multi_logger.get_logger("demo").error("payment.failed", order_id=42, retry=True)

print()
print(f"  sinks installed: {len(multi.children)}")
print(f"  threshold:       {multi_logger.max_level().name}")
print(f"  jsonl file:      {os.environ['MULTI_LOGGER_JSONL_PATH']}")
print()

multi_logger.shutdown_logging()

# ── By hand, for comparison ───────────────────────────────────────
# In a fresh process this is all it takes:
#
#   console = logging.StreamHandler()
#   console.setLevel(logging.WARNING)
#   multi_logger.init([console, multi_logger.MemorySink(Level.INFO)], Level.INFO)
