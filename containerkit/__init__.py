"""Small container utilities: easyfind, Span and MutantStack."""

__version__ = "0.1.0"
__all__ = ["easyfind", "span", "mutant_stack"]