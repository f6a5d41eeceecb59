"""Domain model, ports and business rules.

This package defines *what* the business rules are, independent from
*where* they are applied (services, repositories, API).
"""
