"""Initial schema: users, auth_session, kegiatan, pendaftaran.

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "auth_session",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("session_id", sa.String(length=128), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("session_id", name="uq_auth_session_session_id"),
    )
    op.create_index("ix_auth_session_user", "auth_session", ["user_id"])
    op.create_index("ix_auth_session_expires_at", "auth_session", ["expires_at"])

    op.create_table(
        "kegiatan",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nama_kegiatan", sa.String(length=255), nullable=False),
        sa.Column("deskripsi", sa.Text(), nullable=False, server_default=""),
        sa.Column("tanggal_mulai", sa.Date(), nullable=False),
        sa.Column("tanggal_akhir", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_kegiatan_tanggal_mulai", "kegiatan", ["tanggal_mulai"])

    op.create_table(
        "pendaftaran",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("nama", sa.String(length=80), nullable=False),
        sa.Column("nim", sa.String(length=32), nullable=False),
        sa.Column("prodi", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column(
            "kegiatan_id", sa.Integer(), sa.ForeignKey("kegiatan.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("tanggal_daftar", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "kegiatan_id", name="uq_pendaftaran_user_kegiatan"),
    )
    op.create_index("ix_pendaftaran_kegiatan", "pendaftaran", ["kegiatan_id"])


def downgrade():
    op.drop_index("ix_pendaftaran_kegiatan", table_name="pendaftaran")
    op.drop_table("pendaftaran")
    op.drop_index("ix_kegiatan_tanggal_mulai", table_name="kegiatan")
    op.drop_table("kegiatan")
    op.drop_index("ix_auth_session_expires_at", table_name="auth_session")
    op.drop_index("ix_auth_session_user", table_name="auth_session")
    op.drop_table("auth_session")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
