"""
Supporting utilities for wffrewrite.

Contains the session logger and rule file persistence.
"""
