from linecov.render.source import highlight
from linecov.render.text import render_coverage, render_warnings
from linecov.render.tty_summary import render_tty_summary

__all__ = ["highlight", "render_coverage", "render_tty_summary", "render_warnings"]
