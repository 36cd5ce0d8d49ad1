#!/usr/bin/env python3
"""Gradio Spaces entry point for the pronunciation checker."""

from pronunciation_checker.app.app import main

if __name__ == "__main__":
    main()
