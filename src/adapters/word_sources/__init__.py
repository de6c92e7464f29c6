"""Fuentes de palabras (endpoints concretos).

Por qué un paquete:
- Un módulo por endpoint (puzzelwoordenboek primario, proxy de caché).
- Cada módulo implementa `core.interfaces.word_source.WordSource`.
"""

from adapters.word_sources.cache import CacheProxySource
from adapters.word_sources.primary import PrimaryDictionarySource

__all__ = [
	"CacheProxySource",
	"PrimaryDictionarySource",
]
