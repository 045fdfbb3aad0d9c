"""Core detection engine package for clipguard.

Core contains normalization, fingerprinting, the vault, and the decision
gates without any UI, file, or clock-specific code, keeping the detection
logic portable.
"""
