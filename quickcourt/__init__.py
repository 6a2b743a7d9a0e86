"""
                QuickCourt Notifications

Booking decision notifications for the QuickCourt sports-facility
booking platform, delivered over WhatsApp with a hybrid Mock/Real
gateway architecture.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
