"""
Valuation Report Core

- styling: tier tokens, stylesheet assembly and HTML fragment builders
- charts: data processors, chart rendering, caching and integration
- renderers: styling profiles and PDF output
"""
