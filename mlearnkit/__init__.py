"""Editors, XML bundles and simulators for flash card, spelling and basic mLearning collections."""

__version__ = "0.1.0"