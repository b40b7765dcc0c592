"""create employees and vacations tables

Revision ID: 4b8e2c1d9a07
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b8e2c1d9a07"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=True),
        sa.Column("role", sa.String(length=64), nullable=False),
        sa.Column("department", sa.String(), nullable=True),
        sa.Column("color", sa.String(length=16), nullable=True),
        sa.Column("employee_code", sa.String(length=64), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=True),
        sa.Column("avatar", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_employees_email", "employees", ["email"])
    op.create_index("idx_employees_role", "employees", ["role"])

    op.create_table(
        "vacations",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("employee_id", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_vacations_employee_id", "vacations", ["employee_id"])
    op.create_index("idx_vacations_dates", "vacations", ["start_date", "end_date"])


def downgrade() -> None:
    op.drop_index("idx_vacations_dates", table_name="vacations")
    op.drop_index("idx_vacations_employee_id", table_name="vacations")
    op.drop_table("vacations")
    op.drop_index("idx_employees_role", table_name="employees")
    op.drop_index("idx_employees_email", table_name="employees")
    op.drop_table("employees")
