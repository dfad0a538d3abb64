"""
Dual-LLM Consensus Q&A

Sends each question to two independent LLM backends, asks one of them
whether the two answers mean the same thing, and retries until they agree
or the attempt budget runs out.
"""

__version__ = "1.0.0"
