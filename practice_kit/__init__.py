"""
Practice Kit

Console exercises around a small bank account model: dividing numbers read
from a file, deposit/withdraw rules for regular and savings accounts, and
reading a file with retry on lock.
"""

__version__ = "1.0.0"
