"""
Validación de datos de entrada

Los payloads se validan con los schemas Pydantic de cada entidad; aquí se
traducen los errores de Pydantic a mensajes para el cliente de la API,
devolviendo siempre la lista completa.
"""
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel, ValidationError

from ..exceptions import ValidationFailed


class FieldMessages:
    """Textos de error de un campo"""

    def __init__(
        self,
        label: str,
        required: Optional[str] = None,
        empty: Optional[str] = None,
        invalid: Optional[str] = None,
    ):
        self.label = label
        self.required = required
        self.empty = empty
        self.invalid = invalid


_CODIGO = FieldMessages("El código alternativo")

FIELD_MESSAGES: Dict[str, FieldMessages] = {
    "nombre": FieldMessages(
        "El nombre", required="El nombre es requerido", empty="El nombre no puede estar vacío"
    ),
    "apellido": FieldMessages(
        "El apellido", required="El apellido es requerido", empty="El apellido no puede estar vacío"
    ),
    "descripcion": FieldMessages(
        "La descripción",
        required="La descripción es requerida y debe ser un texto válido",
        empty="La descripción no puede estar vacía",
    ),
    "codigo_alternativo": _CODIGO,
    "codigoAlternativo": _CODIGO,
    "razon": FieldMessages("La razón social"),
    "direccion": FieldMessages("La dirección"),
    "telefono": FieldMessages("El teléfono"),
    "rut": FieldMessages("El RUT"),
    "activo": FieldMessages("El campo activo", invalid="El campo activo debe ser verdadero o falso"),
    "x": FieldMessages("La coordenada X", invalid="La coordenada X debe ser un número válido entre -180 y 180"),
    "y": FieldMessages("La coordenada Y", invalid="La coordenada Y debe ser un número válido entre -90 y 90"),
    "email": FieldMessages("El email", required="El email es requerido", invalid="Formato de email inválido"),
    "password": FieldMessages(
        "La contraseña",
        required="La contraseña es requerida",
        invalid="La contraseña debe tener entre 6 y 72 caracteres",
    ),
    "rol": FieldMessages("El rol", invalid="Rol inválido"),
    "diasIds": FieldMessages(
        "diasIds",
        required="El campo diasIds es requerido",
        invalid="diasIds debe ser una lista de IDs enteros positivos",
    ),
    "camionesIds": FieldMessages(
        "camionesIds",
        required="El campo camionesIds es requerido",
        invalid="camionesIds debe ser una lista de IDs enteros positivos",
    ),
    "page": FieldMessages("page", invalid="page debe ser un entero entre 1 y 2147483647"),
    "limit": FieldMessages("limit", invalid="limit debe ser un entero entre 1 y 100"),
}

# Prefijos de ubicación que FastAPI agrega a los errores de la request
_LOCATIONS = {"body", "query", "path"}

# Tipos de error que en un campo obligatorio equivalen a "falta el valor"
_ABSENT = {"missing", "string_type"}


def _is_blank(error: Dict[str, Any]) -> bool:
    if error["type"] in _ABSENT:
        return True
    return error["type"] == "string_too_short" and error.get("ctx", {}).get("min_length", 1) <= 1


def error_message(error: Dict[str, Any], partial: bool = False) -> str:
    """Mensaje legible para un error de Pydantic"""
    loc = [part for part in error.get("loc", ()) if part not in _LOCATIONS]
    field = str(loc[0]) if loc else None
    kind = error["type"]
    spec = FIELD_MESSAGES.get(field) if field else None

    if kind == "json_invalid":
        return "El cuerpo no es un JSON válido"
    if spec is None:
        if not loc:
            if kind == "missing":
                return "El cuerpo de la petición es requerido"
            if kind == "value_error":
                return str(error["ctx"]["error"])
            return "El cuerpo de la petición debe ser un objeto JSON"
        path = ".".join(str(part) for part in loc)
        return f"{path}: {error['msg']}" if path else error["msg"]

    if kind == "string_too_long":
        return f"{spec.label} no puede exceder {error['ctx']['max_length']} caracteres"
    if spec.required and _is_blank(error):
        return spec.empty if partial and spec.empty else spec.required
    if spec.invalid:
        return spec.invalid
    if kind == "string_type":
        return f"{spec.label} debe ser un texto"
    return f"{spec.label}: {error['msg']}"


def error_messages(errors: Iterable[Dict[str, Any]], partial: bool = False) -> List[str]:
    """Mensajes sin repetir, en el orden en que Pydantic reporta los errores"""
    return list(dict.fromkeys(error_message(error, partial) for error in errors))


def validate_payload(
    schema: Type[BaseModel],
    payload: Any,
    entity: str,
    partial: bool = False,
) -> Dict[str, Any]:
    """
    Valida el payload contra el schema y devuelve los datos limpios

    Args:
        schema: schema Pydantic de entrada
        payload: body JSON de la request
        entity: nombre de la entidad para los mensajes ("cliente", "camión", ...)
        partial: PATCH; solo se devuelven los campos enviados

    Raises:
        ValidationFailed: con la lista completa de errores
    """
    if not isinstance(payload, dict):
        raise ValidationFailed(f"Datos de {entity} inválidos", [f"Los datos del {entity} son requeridos"])
    try:
        data = schema.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed(
            f"Datos de {entity} inválidos",
            error_messages(exc.errors(), partial),
        ) from exc
    return data.model_dump(exclude_unset=partial)
