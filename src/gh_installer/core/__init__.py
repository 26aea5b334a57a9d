"""Core resolution engine: classification, selection and orchestration."""
