"""
Shared Kernel

Small value types shared across the domain apps.
"""
