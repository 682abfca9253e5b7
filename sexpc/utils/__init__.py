"""Terminal output helpers for sexpc"""
