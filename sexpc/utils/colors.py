#!/usr/bin/env python3
import os


class Colors:
    """Terminal output switches shared by the term helpers"""
    # By default use rich markup
    MINIMAL = False
    # Show info/stage messages
    VERBOSE = False


def is_minimal() -> bool:
    # SEXPC_MINIMAL_UI=1 overrides Colors.MINIMAL
    env = os.environ.get('SEXPC_MINIMAL_UI')
    if env is not None:
        return env.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(getattr(Colors, 'MINIMAL', False))


def set_verbose(enabled: bool):
    Colors.VERBOSE = enabled
