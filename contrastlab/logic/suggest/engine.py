#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/suggest/engine.py

import argparse
import json

from contrastlab.core import config as c
from contrastlab.core.contrast import contrast_ratio
from contrastlab.core.suggestions import suggest
from contrastlab.logic.check.resolver import resolve_pair_input
from .renderer import render_suggestions


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the suggest command"""
    background, text = resolve_pair_input(args)

    current = contrast_ratio(background, text)
    suggestions = suggest(background, text, args.target, limit=args.limit)

    if args.json:
        print(json.dumps({
            "background": background.hex,
            "text": text.hex,
            "ratio": round(current, c.RATIO_DECIMALS),
            "target": args.target,
            "suggestions": [s.as_dict() for s in suggestions],
        }, indent=2))
        return

    render_suggestions(background, text, current, args.target, suggestions)
