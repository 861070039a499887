"""
Tests de repositorios (acceso a datos)
"""
import pytest
from sqlalchemy.exc import DataError

from logistica.config import settings
from logistica.exceptions import Conflict, EntityInUse, InvalidArgument, NotFound
from logistica.repositories import (
    CAMION,
    DIA_ENTREGA,
    CamionDiaRepository,
    CamionRepository,
    ClienteRepository,
    DiaEntregaRepository,
    UsuarioRepository,
)
from logistica.utils import verify_password


def _crear_dias(db, *nombres):
    repo = DiaEntregaRepository(db)
    return [repo.create({"descripcion": nombre}) for nombre in nombres]


# ============================================================================
# CRUD GENÉRICO
# ============================================================================

def test_create_y_get_by_id(db):
    repo = ClienteRepository(db)
    cliente = repo.create({
        "codigo_alternativo": "C-9",
        "nombre": "Ferretería Norte",
        "direccion": "Camino Maldonado 4000",
        "x": -56.1,
        "y": -34.8,
    })
    encontrado = repo.get_by_id(cliente.id)
    assert encontrado.id == cliente.id
    assert encontrado.codigo_alternativo == "C-9"
    assert encontrado.nombre == "Ferretería Norte"
    assert encontrado.x == pytest.approx(-56.1)
    assert encontrado.activo is True


def test_get_by_id_inexistente(db):
    with pytest.raises(NotFound):
        CamionRepository(db).get_by_id(999)


def test_list_page_total_independiente_de_la_pagina(db):
    repo = CamionRepository(db)
    for nombre in ["Camión C", "Camión A", "Camión B", "Furgón"]:
        repo.create({"descripcion": nombre})

    items, total = repo.list_page(page=1, limit=2, search="camión")
    assert total == 3
    assert [c.descripcion for c in items] == ["Camión A", "Camión B"]

    items, total = repo.list_page(page=2, limit=2, search="camión")
    assert total == 3
    assert [c.descripcion for c in items] == ["Camión C"]


def test_list_page_busqueda_escapa_comodines(db):
    repo = CamionRepository(db)
    repo.create({"descripcion": "Carga 100%"})
    repo.create({"descripcion": "Carga 1000"})
    items, total = repo.list_page(search="100%")
    assert total == 1
    assert items[0].descripcion == "Carga 100%"


def test_dias_se_ordenan_por_id(db):
    _crear_dias(db, "Viernes", "Lunes")
    items, _ = DiaEntregaRepository(db).list_page()
    assert [d.descripcion for d in items] == ["Viernes", "Lunes"]


def test_clientes_busqueda_y_filtro_activo(db):
    repo = ClienteRepository(db)
    repo.create({"nombre": "Bar Centro", "direccion": "Centro"})
    repo.create({"nombre": "Kiosco", "direccion": "Barrio Centro", "activo": False})
    repo.create({"nombre": "Almacén", "razon": "Otro"})

    _, total = repo.list_page(search="centro")
    assert total == 2

    items, total = repo.list_page(search="centro", activo=True)
    assert total == 1
    assert items[0].nombre == "Bar Centro"


def test_create_duplicado_genera_conflict(db):
    repo = CamionRepository(db)
    repo.create({"descripcion": "Truck A"})
    with pytest.raises(Conflict) as exc_info:
        repo.create({"descripcion": "Truck A"})
    assert exc_info.value.status_code == 409
    # La sesión sigue usable tras el rollback
    assert repo.list_page()[1] == 1


def test_codigo_alternativo_duplicado(db):
    repo = ClienteRepository(db)
    repo.create({"nombre": "A", "codigo_alternativo": "X1"})
    with pytest.raises(Conflict):
        repo.create({"nombre": "B", "codigo_alternativo": "X1"})


def test_conflicto_en_produccion_no_expone_el_driver(db, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    repo = CamionRepository(db)
    repo.create({"descripcion": "Truck A"})
    with pytest.raises(Conflict) as exc_info:
        repo.create({"descripcion": "Truck A"})
    assert exc_info.value.details is None


def test_conflicto_en_desarrollo_incluye_el_driver(db):
    repo = CamionRepository(db)
    repo.create({"descripcion": "Truck A"})
    with pytest.raises(Conflict) as exc_info:
        repo.create({"descripcion": "Truck A"})
    assert "UNIQUE" in exc_info.value.details.upper()


def test_dato_rechazado_por_la_base_es_argumento_invalido(db, monkeypatch):
    """Un valor que la columna no admite (p. ej. texto demasiado largo en PostgreSQL)"""
    def rechazar():
        raise DataError("INSERT INTO clientes", {}, Exception("value too long for type character varying(50)"))

    monkeypatch.setattr(db, "commit", rechazar)
    with pytest.raises(InvalidArgument) as exc_info:
        ClienteRepository(db).create({"nombre": "A", "codigo_alternativo": "C" * 60})
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Datos fuera de rango o con formato inválido"


# ============================================================================
# UPDATE / PATCH / DELETE
# ============================================================================

def test_update_reemplaza_todos_los_campos(db):
    repo = ClienteRepository(db)
    cliente = repo.create({"nombre": "A", "razon": "Razón", "telefono": "123", "activo": False})
    actualizado = repo.update(cliente.id, {"nombre": "B"})
    assert actualizado.nombre == "B"
    assert actualizado.razon is None
    assert actualizado.telefono is None
    assert actualizado.activo is True


def test_patch_cambia_solo_el_campo_enviado(db):
    repo = ClienteRepository(db)
    cliente = repo.create({"nombre": "A", "razon": "Razón", "telefono": "123"})
    repo.patch(cliente.id, {"telefono": "456"})

    db.expire_all()
    recargado = repo.get_by_id(cliente.id)
    assert recargado.telefono == "456"
    assert recargado.nombre == "A"
    assert recargado.razon == "Razón"


def test_patch_vacio_no_modifica(db):
    repo = ClienteRepository(db)
    cliente = repo.create({"nombre": "A"})
    with pytest.raises(InvalidArgument):
        repo.patch(cliente.id, {})
    with pytest.raises(InvalidArgument):
        repo.patch(cliente.id, {"id": 50, "desconocido": 1})
    assert repo.get_by_id(cliente.id).nombre == "A"


def test_patch_inexistente(db):
    with pytest.raises(NotFound):
        CamionRepository(db).patch(123, {"descripcion": "X"})


def test_delete_camion_sin_asignaciones(db):
    repo = CamionRepository(db)
    camion = repo.create({"descripcion": "Truck A"})
    eliminado = repo.delete(camion.id)
    assert eliminado.descripcion == "Truck A"
    with pytest.raises(NotFound):
        repo.get_by_id(camion.id)


def test_cliente_baja_logica(db):
    repo = ClienteRepository(db, soft_delete=True)
    cliente = repo.create({"nombre": "A"})
    eliminado = repo.delete(cliente.id)
    assert eliminado.activo is False
    assert repo.get_by_id(cliente.id).activo is False


def test_cliente_baja_fisica(db):
    repo = ClienteRepository(db, soft_delete=False)
    cliente = repo.create({"nombre": "A"})
    repo.delete(cliente.id)
    with pytest.raises(NotFound):
        repo.get_by_id(cliente.id)


def test_get_ubicacion(db):
    repo = ClienteRepository(db)
    con = repo.create({"nombre": "Con", "x": -56.0, "y": -34.0})
    sin = repo.create({"nombre": "Sin", "x": -56.0})
    assert repo.get_ubicacion(con.id) == {"id": con.id, "nombre": "Con", "x": -56.0, "y": -34.0}
    with pytest.raises(NotFound):
        repo.get_ubicacion(sin.id)
    assert [c.nombre for c in repo.list_con_ubicacion()] == ["Con"]


# ============================================================================
# ASIGNACIONES
# ============================================================================

def test_replace_y_listar_asignaciones(db):
    camion = CamionRepository(db).create({"descripcion": "Truck A"})
    lunes, martes = _crear_dias(db, "Lunes", "Martes")
    repo = CamionDiaRepository(db)

    assert repo.is_referenced(CAMION, camion.id) is False
    dias = repo.replace_assignments(CAMION, camion.id, [martes.id, lunes.id])
    assert [d.descripcion for d in dias] == ["Lunes", "Martes"]
    assert repo.is_referenced(CAMION, camion.id) is True
    assert repo.is_referenced(DIA_ENTREGA, lunes.id) is True
    assert [c.id for c in repo.list_assigned_counterparts(DIA_ENTREGA, martes.id)] == [camion.id]


def test_replace_con_lista_vacia_limpia(db):
    camion = CamionRepository(db).create({"descripcion": "Truck A"})
    (lunes,) = _crear_dias(db, "Lunes")
    repo = CamionDiaRepository(db)
    repo.replace_assignments(CAMION, camion.id, [lunes.id])

    assert repo.replace_assignments(CAMION, camion.id, []) == []
    assert repo.list_assigned_counterparts(CAMION, camion.id) == []
    assert repo.is_referenced(DIA_ENTREGA, lunes.id) is False


def test_replace_entidad_inexistente(db):
    with pytest.raises(NotFound):
        CamionDiaRepository(db).replace_assignments(CAMION, 77, [])


def test_replace_contraparte_inexistente(db):
    camion = CamionRepository(db).create({"descripcion": "Truck A"})
    with pytest.raises(NotFound) as exc_info:
        CamionDiaRepository(db).replace_assignments(CAMION, camion.id, [5, 6])
    assert exc_info.value.details == [5, 6]


def test_replace_es_atomico(db, monkeypatch):
    """Un fallo a mitad de las inserciones deja las asignaciones anteriores"""
    camion = CamionRepository(db).create({"descripcion": "Truck A"})
    lunes, martes, miercoles = _crear_dias(db, "Lunes", "Martes", "Miércoles")
    repo = CamionDiaRepository(db)
    repo.replace_assignments(CAMION, camion.id, [lunes.id])

    original = CamionDiaRepository._add_link
    calls = []

    def failing_add_link(self, *args):
        calls.append(args)
        if len(calls) == 2:
            raise RuntimeError("fallo simulado")
        return original(self, *args)

    monkeypatch.setattr(CamionDiaRepository, "_add_link", failing_add_link)
    with pytest.raises(RuntimeError):
        repo.replace_assignments(CAMION, camion.id, [martes.id, miercoles.id])
    monkeypatch.undo()

    dias = repo.list_assigned_counterparts(CAMION, camion.id)
    assert [d.descripcion for d in dias] == ["Lunes"]


def test_delete_referenciado_sin_guardia_es_error_referencial(db):
    """Si se omite la verificación de uso, la FK de la base lo impide"""
    camion = CamionRepository(db).create({"descripcion": "Truck A"})
    (lunes,) = _crear_dias(db, "Lunes")
    CamionDiaRepository(db).replace_assignments(CAMION, camion.id, [lunes.id])

    with pytest.raises(EntityInUse) as exc_info:
        CamionRepository(db).delete(camion.id)
    assert exc_info.value.code == "referential"
    assert CamionRepository(db).get_by_id(camion.id).descripcion == "Truck A"


def test_list_with_counterparts(db):
    camion_a = CamionRepository(db).create({"descripcion": "A"})
    CamionRepository(db).create({"descripcion": "B"})
    lunes, martes = _crear_dias(db, "Lunes", "Martes")
    CamionDiaRepository(db).replace_assignments(CAMION, camion_a.id, [lunes.id, martes.id])

    rows = CamionDiaRepository(db).list_with_counterparts(CAMION)
    assert [r["descripcion"] for r in rows] == ["A", "B"]
    assert rows[0]["asignados"] == [
        {"id": lunes.id, "descripcion": "Lunes"},
        {"id": martes.id, "descripcion": "Martes"},
    ]
    assert rows[1]["asignados"] == []


# ============================================================================
# USUARIOS
# ============================================================================

def _usuario(**overrides):
    data = {
        "email": "usuario1@mapaclientes.com",
        "password": "usuario123",
        "nombre": "Juan",
        "apellido": "Pérez",
    }
    data.update(overrides)
    return data


def test_usuario_guarda_hash_de_la_contrasena(db):
    usuario = UsuarioRepository(db).create(_usuario())
    assert usuario.password_hash != "usuario123"
    assert verify_password("usuario123", usuario.password_hash)
    assert usuario.rol == "user"
    assert usuario.activo is True


def test_usuario_email_duplicado(db):
    repo = UsuarioRepository(db)
    repo.create(_usuario())
    with pytest.raises(Conflict) as exc_info:
        repo.create(_usuario(nombre="Otro"))
    assert exc_info.value.message == "El email ya está registrado"


def test_usuario_baja_logica(db):
    repo = UsuarioRepository(db)
    usuario = repo.create(_usuario())
    repo.delete(usuario.id)
    assert repo.get_by_id(usuario.id).activo is False


def test_usuario_stats(db):
    repo = UsuarioRepository(db)
    repo.create(_usuario(email="a@mapaclientes.com", rol="admin"))
    repo.create(_usuario(email="b@mapaclientes.com"))
    inactivo = repo.create(_usuario(email="c@mapaclientes.com"))
    repo.delete(inactivo.id)

    assert repo.stats() == {
        "total": 3,
        "activos": 2,
        "inactivos": 1,
        "porRol": {"admin": 1, "user": 2},
    }
