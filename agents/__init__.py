"""
Mahjong Discard Agents
"""

from .random_agent import RandomAgent, TsumogiriAgent

AGENTS = {
    "tsumogiri": TsumogiriAgent,
    "random": RandomAgent,
}

__all__ = [
    "RandomAgent",
    "TsumogiriAgent",
    "AGENTS",
]
