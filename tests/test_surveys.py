"""Survey authoring and catalog."""
from sqlalchemy.exc import OperationalError

from encuestas_backend.models import Survey, Question, AnswerOption
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.services.survey_service import SurveyService

from factories import make_admin, make_project


def survey_payload(project, admin, **overrides):
    payload = {
        "titulo": "Clima laboral",
        "proyectoId": project.id,
        "administradorId": admin.id,
        "preguntas": [
            {"pregunta": "¿Está conforme?", "tipo": "opcion_multiple", "opciones": ["Sí", "No"]},
            {"pregunta": "Del 1 al 3", "tipo": "escala", "opciones": ["1", "2", "3"]},
            {"pregunta": "Sugerencias", "tipo": "abierta"},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_survey(api, db):
    admin = make_admin(db)
    project = make_project(db, "Norte")

    response = api.post("/encuestas", json=survey_payload(project, admin))

    assert response.status_code == 200
    survey = db.get(Survey, response.json()["encuestaId"])
    assert survey.titulo == "Clima laboral"
    assert survey.project_id == project.id
    assert [q.tipo.value for q in survey.questions] == ["opcion_multiple", "escala", "abierta"]
    assert [len(q.options) for q in survey.questions] == [2, 3, 0]


def test_open_question_options_are_ignored(api, db):
    admin = make_admin(db)
    project = make_project(db)
    payload = survey_payload(project, admin, preguntas=[
        {"pregunta": "Libre", "tipo": "abierta", "opciones": ["no se guarda"]},
    ])

    assert api.post("/encuestas", json=payload).status_code == 200
    assert db.query(AnswerOption).count() == 0


def test_choice_question_requires_options(api, db):
    admin = make_admin(db)
    project = make_project(db)
    payload = survey_payload(project, admin, preguntas=[
        {"pregunta": "Sin opciones", "tipo": "opcion_multiple"},
    ])

    assert api.post("/encuestas", json=payload).status_code == 400


def test_unknown_project_or_admin(api, db):
    admin = make_admin(db)
    project = make_project(db)

    missing_project = survey_payload(project, admin, proyectoId=999)
    missing_admin = survey_payload(project, admin, administradorId=999)

    assert api.post("/encuestas", json=missing_project).status_code == 404
    assert api.post("/encuestas", json=missing_admin).status_code == 404
    assert db.query(Survey).count() == 0


def test_failed_option_insert_rolls_back_whole_survey(api, db, monkeypatch):
    admin = make_admin(db)
    project = make_project(db)

    def broken_option(self, question_id, opcion):
        raise OperationalError("INSERT INTO opcion", {}, Exception("disk full"))

    monkeypatch.setattr(SurveyRepository, "create_answer_option", broken_option)

    response = api.post("/encuestas", json=survey_payload(project, admin))

    assert response.status_code == 500
    assert response.json()["detail"] == "disk full"
    assert db.query(Survey).count() == 0
    assert db.query(Question).count() == 0


def test_list_surveys_with_project_name(api, db):
    admin = make_admin(db)
    project = make_project(db, "Norte")
    created = api.post("/encuestas", json=survey_payload(project, admin)).json()

    for path in ("/encuestas", "/encuestas/all"):
        response = api.get(path)
        assert response.status_code == 200
        [item] = response.json()
        assert item["id"] == created["encuestaId"]
        assert item["titulo"] == "Clima laboral"
        assert item["proyecto"] == "Norte"
        assert item["fecha"] is not None


def test_questions_endpoints(api, db):
    admin = make_admin(db)
    project = make_project(db)
    survey_id = api.post("/encuestas", json=survey_payload(project, admin)).json()["encuestaId"]

    plural = api.get(f"/encuestas/{survey_id}/preguntas")
    singular = api.get(f"/encuesta/preguntas/{survey_id}")

    assert plural.status_code == 200
    assert plural.json() == singular.json()
    choice, scale, open_question = plural.json()
    assert [o["opcion"] for o in choice["opciones"]] == ["Sí", "No"]
    assert [o["opcion"] for o in scale["opciones"]] == ["1", "2", "3"]
    assert open_question["opciones"] == []


def test_questions_of_unknown_survey(api):
    assert api.get("/encuestas/999/preguntas").status_code == 404


def test_list_is_empty_without_surveys(db):
    assert SurveyService(db).get_surveys() == []


def test_health(api):
    assert api.get("/health").json()["status"] == "ok"
    assert api.get("/").status_code == 200
