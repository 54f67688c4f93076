class DomainError(Exception):
    """Base de errores de dominio."""

class BadInput(DomainError):
    """Entrada inválida/valores fuera de contrato."""

class ScriptError(DomainError):
    """Terminal failure while updating the GameManager script.

    ``message`` is what the client sees; ``str(err)`` keeps the detail for logs.
    """
    message = "GameManager script error"

class ReadError(ScriptError):
    message = "Failed to read existing GameManager script"

class MarkersNotFound(ScriptError):
    message = "Tags not found in GameManager.lua"

class MarkersOutOfOrder(MarkersNotFound):
    """End tag appears before (or inside) the start tag."""

class WriteError(ScriptError):
    message = "Failed to update GameManager script"
