"""
The one and only variable environment: a flat mapping from name to value,
global for the whole program. Blocks do not push scopes.
"""
from typing import Iterator
from .primitive import VALUE

class UndefinedVariable(KeyError):
	pass

class Environment:
	def __init__(self):
		self._bindings: dict[str, VALUE] = {}
	
	def define(self, name:str, value:VALUE):
		""" Binds or rebinds. Never fails. """
		self._bindings[name] = value
	
	def assign(self, name:str, value:VALUE):
		if name not in self._bindings: raise UndefinedVariable(name)
		self._bindings[name] = value
	
	def lookup(self, name:str) -> VALUE:
		try: return self._bindings[name]
		except KeyError: raise UndefinedVariable(name) from None
	
	def names(self) -> Iterator[str]:
		return iter(self._bindings)
	
	def __contains__(self, name): return name in self._bindings
	def __len__(self): return len(self._bindings)
	def __repr__(self): return "<Environment %r>" % self._bindings
