#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/engine.py

import argparse
import json

from contrastlab.core import config as c
from contrastlab.core.contrast import check, recommended_target
from contrastlab.core.suggestions import suggest
from contrastlab.core.types import TextSize
from .resolver import resolve_pair_input
from .renderer import build_check_report, render_check_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the contrast check"""
    background, text = resolve_pair_input(args)
    size = TextSize.LARGE if args.large else TextSize.NORMAL

    result = check(background, text, size)

    target = recommended_target(result.level, size)
    suggestions = []
    if target is not None:
        suggestions = suggest(background, text, target, limit=c.MAX_DISPLAY_SUGGESTIONS)

    if args.json:
        report = build_check_report(background, text, result, target, suggestions)
        print(json.dumps(report, indent=2))
        return

    render_check_info(
        background=background,
        text=text,
        result=result,
        target=target,
        suggestions=suggestions,
        show_preview=not args.no_preview,
    )
