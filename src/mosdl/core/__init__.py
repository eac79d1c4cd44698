"""Core MOSDL modules: IR, loading, configuration and errors."""
