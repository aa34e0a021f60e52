from .language_registry import LanguageDescriptor, LanguageRegistry, build_default_registry

__all__ = ["LanguageDescriptor", "LanguageRegistry", "build_default_registry"]
