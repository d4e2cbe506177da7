"""Builders for test data."""
from encuestas_backend.core.security import get_password_hash
from encuestas_backend.models import (
    Administrator, Client, Project, ProjectMembership, QuestionType
)
from encuestas_backend.schemas.survey import SurveyCreate, QuestionCreate
from encuestas_backend.schemas.response import SurveyResponseCreate, AnswerInput
from encuestas_backend.services.survey_service import SurveyService
from encuestas_backend.services.response_service import ResponseService


def make_admin(db, usuario="admin", password="secret"):
    admin = Administrator(usuario=usuario, hashed_password=get_password_hash(password))
    db.add(admin)
    db.commit()
    return admin


def make_project(db, nombre="Proyecto"):
    project = Project(nombre=nombre)
    db.add(project)
    db.commit()
    return project


def make_client(db, usuario="cliente", password="secret", projects=()):
    client = Client(
        nombre="Nombre",
        apellido="Apellido",
        usuario=usuario,
        hashed_password=get_password_hash(password),
        rol="cliente",
    )
    db.add(client)
    db.flush()
    for project in projects:
        db.add(ProjectMembership(project_id=project.id, client_id=client.id))
    db.commit()
    return client


def make_survey(db, project, admin, titulo="Encuesta", preguntas=None):
    """Create a survey through the service; defaults to one choice and one open question."""
    if preguntas is None:
        preguntas = [
            QuestionCreate(pregunta="¿Le gustó?", tipo=QuestionType.OPCION_MULTIPLE, opciones=["Sí", "No"]),
            QuestionCreate(pregunta="Comentarios", tipo=QuestionType.ABIERTA),
        ]
    return SurveyService(db).create_survey(SurveyCreate(
        titulo=titulo,
        proyecto_id=project.id,
        administrador_id=admin.id,
        preguntas=preguntas,
    ))


def answer(db, survey, client, *answers):
    """Record a response; answers are (question_id, text_or_option_id) pairs."""
    items = []
    for question_id, value in answers:
        if isinstance(value, str):
            items.append(AnswerInput(pregunta_id=question_id, contenido_texto=value))
        else:
            items.append(AnswerInput(pregunta_id=question_id, opcion_id=value))
    return ResponseService(db).record_response(SurveyResponseCreate(
        encuesta_id=survey.id,
        cliente_id=client.id,
        respuestas=items,
    ))
