"""
Core calculation primitives: calendar arithmetic, geodesy, unit conversion.

This module contains pure, stateless building blocks that are independent
of external systems (mail transport, OS access control, etc.).
"""
