"""State, layout and text rendering for terminal widgets: scrollbars, radio
groups, status prompts, frames, size boxes, edit lines, pagers, menus,
multiplexers and stacks."""

__version__ = "0.1.0"