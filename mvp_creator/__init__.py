# mvp_creator/__init__.py
"""Turn a product idea into a single-file landing page with an LLM."""

__version__ = "0.1.0"
