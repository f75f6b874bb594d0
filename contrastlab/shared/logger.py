#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/logger.py

import sys
import argparse

from contrastlab.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def fail(message: str, hint: str = None, code: int = 2) -> None:
    """Log an error (and an optional info hint) and exit."""
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(code)


class ContrastlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Report usage errors through the color-coded logger,
        then exit with the standard CLI error code 2.
        """
        fail(message, hint=f"use '{self.prog} --help' for more information")
