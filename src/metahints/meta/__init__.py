"""Metaprogramming building blocks: constants, annotations and reflection."""
