"""
profitability - Property Profitability Estimate Engine

Deterministic cost / income / yield breakdown and viability verdict for a
single rental property acquisition.

Modules:
    - core: Settings, logging, exceptions and shared financial helpers
    - domain: Pydantic input/result models and the per-stage calculators
    - application: The estimate pipeline that chains the calculators
    - services: Presentation, export and snapshot versioning helpers
"""

__version__ = "1.4.0"
