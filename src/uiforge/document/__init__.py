"""
Design document parsing
Converts persisted design JSON into component records
"""

from .parser import Design, DesignParser, parse_design, try_parse_design

__all__ = ['Design', 'DesignParser', 'parse_design', 'try_parse_design']
