"""User-facing strings. The product ships a single Spanish (es-CO) locale."""

EMPTY_QUERY_MESSAGE = (
    "Por favor, ingresa el nombre de un residuo o sube una imagen."
)
AMBIGUOUS_QUERY_MESSAGE = (
    "Ingresa el nombre de un residuo o sube una imagen, pero no ambos."
)
REPORT_REQUEST_FAILED_MESSAGE = (
    "Error al contactar el servicio de IA: no se pudo obtener una respuesta "
    "del modelo de IA. Intenta de nuevo en unos minutos."
)
UNPROCESSABLE_REPORT_NOTICE = "No se pudo procesar la respuesta."
UPLOAD_TOO_LARGE_MESSAGE = (
    "La imagen es demasiado grande. Usa una foto más liviana e intenta de nuevo."
)
