"""Seed database with initial test data."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from encuestas_backend.core.database import SessionLocal, engine, Base
from encuestas_backend.core.security import get_password_hash
from encuestas_backend.models import (
    Administrator, Client, Project, ProjectMembership,
    Survey, Question, QuestionType, AnswerOption
)


def seed():
    """Create an administrator, a project, a member client and a sample survey."""
    db = SessionLocal()

    try:
        if db.query(Administrator).first():
            print("Data already exists. Skipping seed.")
            return

        admin = Administrator(usuario="admin", hashed_password=get_password_hash("admin123"))
        project = Project(nombre="Proyecto Demo")
        client = Client(
            nombre="Ana",
            apellido="Pérez",
            usuario="ana",
            hashed_password=get_password_hash("ana123"),
            rol="cliente",
        )
        db.add_all([admin, project, client])
        db.flush()

        db.add(ProjectMembership(project_id=project.id, client_id=client.id))

        survey = Survey(titulo="Satisfacción del servicio", project_id=project.id, admin_id=admin.id)
        db.add(survey)
        db.flush()

        choice = Question(
            survey_id=survey.id,
            pregunta="¿Cómo calificaría el servicio?",
            tipo=QuestionType.OPCION_MULTIPLE,
        )
        scale = Question(
            survey_id=survey.id,
            pregunta="Del 1 al 5, ¿recomendaría el servicio?",
            tipo=QuestionType.ESCALA,
        )
        open_question = Question(
            survey_id=survey.id,
            pregunta="¿Qué podríamos mejorar?",
            tipo=QuestionType.ABIERTA,
        )
        db.add_all([choice, scale, open_question])
        db.flush()

        db.add_all([AnswerOption(question_id=choice.id, opcion=o) for o in ("Bueno", "Regular", "Malo")])
        db.add_all([AnswerOption(question_id=scale.id, opcion=str(n)) for n in range(1, 6)])
        db.commit()

        print("✅ Seeded demo data:")
        print("  - administrador: admin (password: admin123)")
        print("  - cliente: ana (password: ana123), miembro de 'Proyecto Demo'")
        print(f"  - encuesta #{survey.id}: {survey.titulo}")

    except Exception as e:
        print(f"❌ Error seeding data: {e}")
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":
    # Create tables if they don't exist
    Base.metadata.create_all(bind=engine)

    seed()
