"""
Core package providing the transition-resolution engine.

Architecture:
- Transition tables keyed by (symbol, state), by state alone, and a default
- Resolution by fixed precedence: exact, wildcard, default
- A machine that applies one resolved transition per input symbol

Cross-cutting:
- Errors derive from FSMError and always propagate to the caller
- Diagnostics through the standard logging module
- Hooks observe transitions and failures without altering them
"""
