"""Analytics use cases"""
from .get_analytics import GetAnalytics

__all__ = ["GetAnalytics"]
