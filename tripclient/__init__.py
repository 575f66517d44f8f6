"""tripclient: multimodal trip-planning client."""

__version__ = "1.0.0"
