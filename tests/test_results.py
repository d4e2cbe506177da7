"""Survey results aggregation."""
import math

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from encuestas_backend.models import QuestionType
from encuestas_backend.repositories.response_repository import ResponseRepository
from encuestas_backend.schemas.survey import QuestionCreate
from encuestas_backend.services.results_service import ResultsService, percentage

from factories import make_admin, make_project, make_client, make_survey, answer


@pytest.fixture
def survey_setup(db):
    """Survey with one choice question (A, B, C) and one open question."""
    admin = make_admin(db)
    project = make_project(db)
    survey = make_survey(db, project, admin, preguntas=[
        QuestionCreate(pregunta="Color", tipo=QuestionType.OPCION_MULTIPLE, opciones=["A", "B", "C"]),
        QuestionCreate(pregunta="Comentarios", tipo=QuestionType.ABIERTA),
    ])
    choice, open_question = survey.questions
    return survey, choice, open_question, project


def test_percentage_of_zero_total_is_zero():
    assert percentage(0, 0) == 0.0
    assert percentage(3, 4) == 75.0


def test_counts_and_percentages(db, survey_setup):
    survey, choice, open_question, project = survey_setup
    a, b, c = choice.options
    for i, option in enumerate([a, a, a, b]):
        client = make_client(db, usuario=f"c{i}", projects=[project])
        answer(db, survey, client, (choice.id, option.id))

    report = ResultsService(db).aggregate_results(survey.id)

    assert report.total_respuestas == 4
    [result] = report.preguntas_opcion_multiple
    assert result.total_respuestas == 4
    tallies = {t.opcion: t for t in result.opciones}
    assert tallies["A"].cantidad == 3
    assert tallies["A"].porcentaje == 75
    assert tallies["B"].cantidad == 1
    assert tallies["B"].porcentaje == 25
    assert tallies["C"].cantidad == 0
    assert tallies["C"].porcentaje == 0


def test_no_responses_gives_zero_percentages(db, survey_setup):
    survey, *_ = survey_setup

    report = ResultsService(db).aggregate_results(survey.id)

    assert report.total_respuestas == 0
    [result] = report.preguntas_opcion_multiple
    assert result.total_respuestas == 0
    assert all(t.porcentaje == 0 for t in result.opciones)
    assert sum(t.porcentaje for t in result.opciones) == 0


def test_percentages_add_up_to_100(db, survey_setup):
    survey, choice, _, project = survey_setup
    a, b, c = choice.options
    for i, option in enumerate([a, b, c]):
        client = make_client(db, usuario=f"c{i}", projects=[project])
        answer(db, survey, client, (choice.id, option.id))

    [result] = ResultsService(db).aggregate_results(survey.id).preguntas_opcion_multiple

    assert math.isclose(sum(t.porcentaje for t in result.opciones), 100.0)


def test_open_answers_are_listed_but_not_counted(db, survey_setup):
    survey, choice, open_question, project = survey_setup
    ana = make_client(db, usuario="ana", projects=[project])
    luis = make_client(db, usuario="luis", projects=[project])
    answer(db, survey, ana, (choice.id, choice.options[0].id), (open_question.id, "Muy bien"))
    answer(db, survey, luis, (open_question.id, "Podría mejorar"))

    report = ResultsService(db).aggregate_results(survey.id)

    assert report.total_respuestas == 1
    [open_result] = report.preguntas_abiertas
    assert open_result.idpregunta == open_question.id
    assert sorted(open_result.respuestas) == ["Muy bien", "Podría mejorar"]


def test_total_is_sum_over_choice_questions(db):
    admin = make_admin(db)
    project = make_project(db)
    survey = make_survey(db, project, admin, preguntas=[
        QuestionCreate(pregunta="Q1", tipo=QuestionType.OPCION_MULTIPLE, opciones=["X", "Y"]),
        QuestionCreate(pregunta="Q2", tipo=QuestionType.OPCION_MULTIPLE, opciones=["Z"]),
        QuestionCreate(pregunta="Q3", tipo=QuestionType.ESCALA, opciones=["1", "2", "3"]),
    ])
    q1, q2, q3 = survey.questions
    for i in range(3):
        client = make_client(db, usuario=f"c{i}", projects=[project])
        answers = [(q1.id, q1.options[i % 2].id), (q3.id, q3.options[0].id)]
        if i < 2:
            answers.append((q2.id, q2.options[0].id))
        answer(db, survey, client, *answers)

    report = ResultsService(db).aggregate_results(survey.id)

    # Scale questions are not part of the multiple-choice report
    assert [q.idpregunta for q in report.preguntas_opcion_multiple] == [q1.id, q2.id]
    assert report.total_respuestas == sum(q.total_respuestas for q in report.preguntas_opcion_multiple)
    assert report.total_respuestas == 5


def test_aggregation_is_idempotent(db, survey_setup):
    survey, choice, open_question, project = survey_setup
    client = make_client(db, projects=[project])
    answer(db, survey, client, (choice.id, choice.options[1].id), (open_question.id, "ok"))

    service = ResultsService(db)
    assert service.aggregate_results(survey.id) == service.aggregate_results(survey.id)


def test_failed_option_count_degrades_to_zero(db, survey_setup, monkeypatch):
    # Best-effort reporting: one failing count does not fail the report
    survey, choice, _, project = survey_setup
    a, b, _ = choice.options
    for i, option in enumerate([a, b, b]):
        client = make_client(db, usuario=f"c{i}", projects=[project])
        answer(db, survey, client, (choice.id, option.id))

    original = ResponseRepository.count_by_option

    def flaky_count(self, option_id):
        if option_id == a.id:
            raise OperationalError("SELECT count", {}, Exception("timeout"))
        return original(self, option_id)

    monkeypatch.setattr(ResponseRepository, "count_by_option", flaky_count)

    report = ResultsService(db).aggregate_results(survey.id)

    tallies = {t.idopcion: t for t in report.preguntas_opcion_multiple[0].opciones}
    assert tallies[a.id].cantidad == 0
    assert tallies[b.id].cantidad == 2
    assert tallies[b.id].porcentaje == 100
    assert report.total_respuestas == 2


def test_failed_open_answers_degrade_to_empty(db, survey_setup, monkeypatch):
    survey, _, open_question, project = survey_setup
    client = make_client(db, projects=[project])
    answer(db, survey, client, (open_question.id, "texto"))

    def broken_fetch(self, question_id):
        raise OperationalError("SELECT contenido_texto", {}, Exception("timeout"))

    monkeypatch.setattr(ResponseRepository, "get_texts_for_question", broken_fetch)

    report = ResultsService(db).aggregate_results(survey.id)

    assert report.preguntas_abiertas[0].respuestas == []


def test_outage_after_first_count_still_degrades(db, engine, survey_setup, monkeypatch):
    # Once the first count runs every statement fails, question and option
    # text included.
    survey, choice, open_question, project = survey_setup
    client = make_client(db, projects=[project])
    answer(db, survey, client, (choice.id, choice.options[0].id), (open_question.id, "texto"))
    survey_id = survey.id
    option_ids = [option.id for option in choice.options]
    backend_down = []

    def fail_while_down(conn, cursor, statement, parameters, context, executemany):
        if backend_down:
            raise OperationalError(statement, parameters, Exception("connection lost"))

    original = ResponseRepository.count_by_option

    def count_then_go_down(self, option_id):
        backend_down.append(option_id)
        return original(self, option_id)

    monkeypatch.setattr(ResponseRepository, "count_by_option", count_then_go_down)
    event.listen(engine, "before_cursor_execute", fail_while_down)
    try:
        report = ResultsService(db).aggregate_results(survey_id)
    finally:
        event.remove(engine, "before_cursor_execute", fail_while_down)

    [result] = report.preguntas_opcion_multiple
    assert result.pregunta == "Color"
    assert [t.idopcion for t in result.opciones] == option_ids
    assert [t.opcion for t in result.opciones] == ["A", "B", "C"]
    assert all(t.cantidad == 0 for t in result.opciones)
    assert report.total_respuestas == 0
    assert report.preguntas_abiertas[0].pregunta == "Comentarios"
    assert report.preguntas_abiertas[0].respuestas == []


def test_results_endpoint(api, db, survey_setup):
    survey, choice, open_question, project = survey_setup
    client = make_client(db, projects=[project])
    answer(db, survey, client, (choice.id, choice.options[0].id), (open_question.id, "Genial"))

    response = api.get(f"/encuestas/{survey.id}/resultados")

    assert response.status_code == 200
    body = response.json()
    assert body["totalRespuestas"] == 1
    [mc] = body["preguntasOpcionMultiple"]
    assert mc["total_respuestas"] == 1
    assert mc["opciones"][0]["porcentaje"] == 100
    assert body["preguntasAbiertas"][0]["respuestas"] == ["Genial"]


def test_results_for_unknown_survey(api):
    assert api.get("/encuestas/999/resultados").status_code == 404
