"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

question_type = sa.Enum('OPCION_MULTIPLE', 'ABIERTA', 'ESCALA', name='questiontype')


def upgrade() -> None:
    op.create_table(
        'administrador',
        sa.Column('idadmin', sa.Integer, primary_key=True),
        sa.Column('usuario', sa.String(100), nullable=False),
        sa.Column('hashed_password', sa.String, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_administrador_usuario', 'administrador', ['usuario'], unique=True)

    op.create_table(
        'cliente',
        sa.Column('idcliente', sa.Integer, primary_key=True),
        sa.Column('nombre', sa.String(100), nullable=False),
        sa.Column('apellido', sa.String(100), nullable=False),
        sa.Column('usuario', sa.String(100), nullable=False),
        sa.Column('hashed_password', sa.String, nullable=False),
        sa.Column('rol', sa.String(50), nullable=False, server_default='cliente'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_cliente_usuario', 'cliente', ['usuario'], unique=True)

    op.create_table(
        'proyecto',
        sa.Column('idproyecto', sa.Integer, primary_key=True),
        sa.Column('nombre', sa.String(200), nullable=False),
    )
    op.create_index('uq_proyecto_nombre_lower', 'proyecto', [sa.text('lower(nombre)')], unique=True)

    op.create_table(
        'proyecto_cliente',
        sa.Column('idproyecto', sa.Integer, sa.ForeignKey('proyecto.idproyecto', ondelete='CASCADE'), primary_key=True),
        sa.Column('idcliente', sa.Integer, sa.ForeignKey('cliente.idcliente', ondelete='CASCADE'), primary_key=True),
    )
    op.create_index('ix_proyecto_cliente_idcliente', 'proyecto_cliente', ['idcliente'])

    op.create_table(
        'encuesta',
        sa.Column('idencuesta', sa.Integer, primary_key=True),
        sa.Column('titulo', sa.String(255), nullable=False),
        sa.Column('fecha', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('idproyecto', sa.Integer, sa.ForeignKey('proyecto.idproyecto', ondelete='SET NULL'), nullable=True),
        sa.Column('idadmin', sa.Integer, sa.ForeignKey('administrador.idadmin', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_encuesta_idproyecto', 'encuesta', ['idproyecto'])

    op.create_table(
        'pregunta',
        sa.Column('idpregunta', sa.Integer, primary_key=True),
        sa.Column('idencuesta', sa.Integer, sa.ForeignKey('encuesta.idencuesta', ondelete='CASCADE'), nullable=False),
        sa.Column('pregunta', sa.Text, nullable=False),
        sa.Column('tipo', question_type, nullable=False),
    )
    op.create_index('ix_pregunta_idencuesta', 'pregunta', ['idencuesta'])

    op.create_table(
        'opcion',
        sa.Column('idopcion', sa.Integer, primary_key=True),
        sa.Column('idpregunta', sa.Integer, sa.ForeignKey('pregunta.idpregunta', ondelete='CASCADE'), nullable=False),
        sa.Column('opcion', sa.String(500), nullable=False),
    )
    op.create_index('ix_opcion_idpregunta', 'opcion', ['idpregunta'])

    op.create_table(
        'respuesta',
        sa.Column('idrespuesta', sa.Integer, primary_key=True),
        sa.Column('idencuesta', sa.Integer, sa.ForeignKey('encuesta.idencuesta', ondelete='CASCADE'), nullable=False),
        sa.Column('idcliente', sa.Integer, sa.ForeignKey('cliente.idcliente', ondelete='CASCADE'), nullable=False),
        sa.Column('fecha', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('idencuesta', 'idcliente', name='uq_respuesta_encuesta_cliente'),
    )
    op.create_index('ix_respuesta_idencuesta', 'respuesta', ['idencuesta'])
    op.create_index('ix_respuesta_idcliente', 'respuesta', ['idcliente'])

    op.create_table(
        'detalle_respuesta',
        sa.Column('iddetalle', sa.Integer, primary_key=True),
        sa.Column('idrespuesta', sa.Integer, sa.ForeignKey('respuesta.idrespuesta', ondelete='CASCADE'), nullable=False),
        sa.Column('idpregunta', sa.Integer, sa.ForeignKey('pregunta.idpregunta', ondelete='RESTRICT'), nullable=False),
        sa.Column('contenido_texto', sa.Text, nullable=True),
        sa.Column('idopcion', sa.Integer, sa.ForeignKey('opcion.idopcion', ondelete='RESTRICT'), nullable=True),
        sa.CheckConstraint('(contenido_texto IS NULL) <> (idopcion IS NULL)', name='check_detalle_un_valor'),
    )
    op.create_index('ix_detalle_respuesta_idrespuesta', 'detalle_respuesta', ['idrespuesta'])
    op.create_index('ix_detalle_respuesta_idpregunta', 'detalle_respuesta', ['idpregunta'])
    op.create_index('ix_detalle_respuesta_idopcion', 'detalle_respuesta', ['idopcion'])


def downgrade() -> None:
    op.drop_table('detalle_respuesta')
    op.drop_table('respuesta')
    op.drop_table('opcion')
    op.drop_table('pregunta')
    op.drop_table('encuesta')
    op.drop_table('proyecto_cliente')
    op.drop_table('proyecto')
    op.drop_table('cliente')
    op.drop_table('administrador')
    question_type.drop(op.get_bind(), checkfirst=True)
