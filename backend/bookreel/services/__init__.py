"""
Service layer: LLM providers, pipeline stages and use cases.
"""
