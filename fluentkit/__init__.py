"""Building blocks for Fluent-style user interfaces: themes, text styles, tree and view models, watermark layout and QR masking."""

__version__ = "1.0.0"

__all__ = [
    "bitstream",
    "microqr_spec",
    "micro_mask",
    "qr_mask",
    "text_style",
    "theme",
    "tools",
    "watermark",
    "tree_model",
    "view_model",
]