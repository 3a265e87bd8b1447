"""
followcast - SARIMA forecasting of hourly follower activity.
"""

__version__ = "0.1.0"
