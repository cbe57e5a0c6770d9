"""
Core business logic for TechMatch.

Submodules:
- matching: Skill matching engine and matching service
- exceptions: Errors reported to callers
"""
