"""
Constantes del dominio de la aplicación.
"""

# Estados de garantía
GARANTIA_PENDIENTE_VALIDACION = 'PV'
GARANTIA_VALIDADA = 'V'
GARANTIA_INVALIDA = 'I'
GARANTIA_REVOCADA = 'R'
GARANTIA_ENVIADA = 'E'
GARANTIA_CANCELADA = 'cancelada'

# Estados de reembolso
REEMBOLSO_PENDIENTE = 'P'
REEMBOLSO_APROBADO = 'A'
REEMBOLSO_REVOCADO = 'R'

# Estados de subasta
SUBASTA_ABIERTA = 'ABIERTO'
SUBASTA_CERRADA = 'CERRADA'
SUBASTA_CANCELADA = 'CANCELADA'

# Estados deducidos de facturación (no se persisten)
FACTURACION_PENDIENTE = 'PENDIENTE'
FACTURACION_VALIDADA = 'VALIDADA'
FACTURACION_REVOCADA = 'REVOCADA'

# Nombres de transición expuestos en la API
TRANSICION_VALIDAR = 'validate'
TRANSICION_INVALIDAR = 'invalid'
TRANSICION_REVOCAR = 'revoke'
TRANSICION_PAGAR = 'paid'
TRANSICION_ENVIAR = 'sent'
TRANSICION_CERRAR = 'close'
TRANSICION_CANCELAR = 'cancel'
TRANSICION_ALTERNAR = 'toggle'

# Mensajes de validación
MENSAJE_CAMPOS_OBLIGATORIOS = 'Todos los campos obligatorios deben ser proporcionados'
MENSAJE_EMAIL_INVALIDO = 'El formato del correo no es válido'
MENSAJE_CUERPO_INVALIDO = 'El cuerpo de la petición no es válido'
MENSAJE_ID_CLIENTE = 'El ID del cliente debe ser un número válido'
MENSAJE_ID_SUBASTA = 'El ID de la subasta debe ser un número válido'
