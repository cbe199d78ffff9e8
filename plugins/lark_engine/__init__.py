"""
Lark grammar engine plugin.
"""

from plugins.lark_engine.plugin import LarkPlugin

__all__ = ['LarkPlugin']
