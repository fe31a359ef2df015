"""
Storefront

Cart, coupon, checkout and order console service for the shop frontend.
"""

__version__ = "1.0.0"
