"""Core domain package for tripwire.

Core contains keyword rules, the known-bad corpus, matching, and the link,
file, and message classifiers without any Telegram or network-specific code,
keeping the classification logic portable.
"""
