"""
Carga de datos iniciales (idempotente)

Uso:
    python -m logistica.seed
"""
import logging

from sqlalchemy.orm import Session

from .models import Camion, CamionDia, Cliente, DiaEntrega, SessionLocal, Usuario, init_db
from .utils.security import hash_password

logger = logging.getLogger(__name__)

DIAS = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes"]

CAMIONES = [
    "Daniel Torres",
    "Alvaro Garcia",
    "Robert Labruna",
    "Jose Luis",
    "Reparto Nuevo",
]

# (camión, día) por índice en las listas anteriores
RELACIONES = [(0, 0), (0, 1), (1, 2), (1, 3), (2, 4)]

CLIENTES = [
    {
        "codigo_alternativo": "C-0001",
        "nombre": "Almacén Don Pedro",
        "razon": "Pedro Gómez S.A.",
        "direccion": "Av. Italia 1234",
        "telefono": "099123456",
        "x": -56.1645,
        "y": -34.9011,
    },
    {
        "codigo_alternativo": "C-0002",
        "nombre": "Supermercado El Sol",
        "razon": "El Sol S.R.L.",
        "direccion": "Bv. Artigas 500",
        "telefono": "098765432",
    },
    {
        "codigo_alternativo": "C-0003",
        "nombre": "Kiosco La Esquina",
        "direccion": "18 de Julio 2020",
        "activo": False,
    },
]

# (email, contraseña, nombre, apellido, rol, activo)
USUARIOS = [
    ("admin@mapaclientes.com", "admin123", "Administrador", "Principal", "super_admin", True),
    ("gerente@mapaclientes.com", "gerente123", "María", "González", "admin", True),
    ("usuario1@mapaclientes.com", "usuario123", "Juan", "Pérez", "user", True),
    ("usuario2@mapaclientes.com", "usuario123", "Ana", "Martínez", "user", True),
    ("operador@mapaclientes.com", "operador123", "Carlos", "Rodríguez", "user", True),
    ("supervisor@mapaclientes.com", "supervisor123", "Laura", "Fernández", "admin", True),
    ("inactivo@mapaclientes.com", "inactivo123", "Usuario", "Inactivo", "user", False),
]


def _get_or_create(db: Session, model, defaults=None, **lookup):
    instance = db.query(model).filter_by(**lookup).first()
    if instance:
        return instance, False
    instance = model(**lookup, **(defaults or {}))
    db.add(instance)
    db.flush()
    return instance, True


def seed(db: Session) -> None:
    dias = [_get_or_create(db, DiaEntrega, descripcion=d)[0] for d in DIAS]
    logger.info(f"Días de entrega listos: {len(dias)}")

    camiones = [_get_or_create(db, Camion, descripcion=c)[0] for c in CAMIONES]
    logger.info(f"Camiones listos: {len(camiones)}")

    creadas = 0
    for camion_idx, dia_idx in RELACIONES:
        _, created = _get_or_create(
            db, CamionDia,
            camion_id=camiones[camion_idx].id,
            dia_entrega_id=dias[dia_idx].id,
        )
        creadas += int(created)
    logger.info(f"Relaciones camiones-días nuevas: {creadas}")

    for data in CLIENTES:
        defaults = {k: v for k, v in data.items() if k != "codigo_alternativo"}
        _get_or_create(db, Cliente, defaults=defaults, codigo_alternativo=data["codigo_alternativo"])
    logger.info(f"Clientes listos: {len(CLIENTES)}")

    nuevos = 0
    for email, password, nombre, apellido, rol, activo in USUARIOS:
        if db.query(Usuario).filter_by(email=email).first():
            continue
        db.add(Usuario(
            email=email,
            password_hash=hash_password(password),
            nombre=nombre,
            apellido=apellido,
            rol=rol,
            activo=activo,
        ))
        nuevos += 1
    logger.info(f"Usuarios nuevos: {nuevos}")

    db.commit()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")
    init_db()
    with SessionLocal() as db:
        seed(db)
    logger.info("Seed completado")


if __name__ == "__main__":
    main()
