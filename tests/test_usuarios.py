"""
Tests de endpoints de usuarios
"""
from logistica.models import Usuario
from logistica.utils import verify_password


def _crear(client, email="usuario1@mapaclientes.com", **data):
    payload = {
        "email": email,
        "password": "usuario123",
        "nombre": "Juan",
        "apellido": "Pérez",
        **data,
    }
    response = client.post("/api/usuarios", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()["data"]


def test_create_usuario(client, db):
    usuario = _crear(client, email="Gerente@MapaClientes.com", rol="admin")
    assert usuario["email"] == "gerente@mapaclientes.com"
    assert usuario["rol"] == "admin"
    assert usuario["activo"] is True
    assert "password" not in usuario
    assert "password_hash" not in usuario

    guardado = db.query(Usuario).filter_by(id=usuario["id"]).one()
    assert guardado.password_hash != "usuario123"
    assert verify_password("usuario123", guardado.password_hash)


def test_create_usuario_email_duplicado(client):
    _crear(client)
    response = client.post("/api/usuarios", json={
        "email": "USUARIO1@mapaclientes.com",
        "password": "otra123",
        "nombre": "Otro",
        "apellido": "Usuario",
    })
    assert response.status_code == 409
    assert response.json()["error"] == "El email ya está registrado"


def test_create_usuario_invalido(client):
    response = client.post("/api/usuarios", json={
        "email": "sin-arroba",
        "password": "123",
        "nombre": "",
        "apellido": "Pérez",
        "rol": "root",
    })
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Datos de usuario inválidos"
    assert body["details"] == [
        "Formato de email inválido",
        "La contraseña debe tener entre 6 y 72 caracteres",
        "El nombre es requerido",
        "Rol inválido",
    ]


def test_get_usuario(client):
    usuario = _crear(client)
    response = client.get(f"/api/usuarios/{usuario['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "usuario1@mapaclientes.com"

    response = client.get("/api/usuarios/999")
    assert response.status_code == 404
    assert response.json()["error"] == "Usuario no encontrado"


def test_list_usuarios_filtros(client):
    _crear(client, email="admin@mapaclientes.com", nombre="Laura", rol="admin")
    _crear(client, email="usuario1@mapaclientes.com", nombre="Juan")
    inactivo = _crear(client, email="inactivo@mapaclientes.com", nombre="Ana")
    client.delete(f"/api/usuarios/{inactivo['id']}")

    body = client.get("/api/usuarios").json()
    assert body["pagination"]["total"] == 3
    # Más recientes primero
    assert body["data"][0]["email"] == "inactivo@mapaclientes.com"

    body = client.get("/api/usuarios?rol=admin").json()
    assert [u["nombre"] for u in body["data"]] == ["Laura"]

    body = client.get("/api/usuarios?activo=false").json()
    assert [u["nombre"] for u in body["data"]] == ["Ana"]

    body = client.get("/api/usuarios?search=usuario1").json()
    assert [u["nombre"] for u in body["data"]] == ["Juan"]

    response = client.get("/api/usuarios?rol=root")
    assert response.status_code == 400
    assert response.json()["error"] == "Parámetros de consulta inválidos"


def test_update_usuario(client):
    usuario = _crear(client)
    response = client.put(f"/api/usuarios/{usuario['id']}", json={"nombre": "Juan Carlos", "rol": "admin"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["nombre"] == "Juan Carlos"
    assert data["rol"] == "admin"
    assert data["apellido"] == "Pérez"

    response = client.patch(f"/api/usuarios/{usuario['id']}", json={"activo": None})
    assert response.status_code == 400


def test_update_usuario_a_email_existente(client):
    _crear(client, email="admin@mapaclientes.com")
    usuario = _crear(client)
    response = client.patch(f"/api/usuarios/{usuario['id']}", json={"email": "admin@mapaclientes.com"})
    assert response.status_code == 409


def test_delete_usuario_es_baja_logica(client):
    usuario = _crear(client)
    response = client.delete(f"/api/usuarios/{usuario['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["activo"] is False
    assert client.get(f"/api/usuarios/{usuario['id']}").json()["data"]["activo"] is False


def test_usuarios_stats(client):
    _crear(client, email="admin@mapaclientes.com", rol="super_admin")
    _crear(client, email="usuario1@mapaclientes.com")
    inactivo = _crear(client, email="usuario2@mapaclientes.com")
    client.delete(f"/api/usuarios/{inactivo['id']}")

    response = client.get("/api/usuarios/stats")
    assert response.status_code == 200
    assert response.json()["data"] == {
        "total": 3,
        "activos": 2,
        "inactivos": 1,
        "porRol": {"super_admin": 1, "user": 2},
    }
