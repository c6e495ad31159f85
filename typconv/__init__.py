"""TypConv package initialization.

Provides a desktop settings form for Markdown/Typst conversion options.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
