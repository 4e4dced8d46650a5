class ConfigurationError(ValueError):
  """Invalid field, hash or scheme configuration (fatal, detected at setup)"""

class VectorMismatch(ValueError):
  """Conformity vectors did not reproduce"""
