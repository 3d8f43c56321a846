"""create employee and admin collections"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_staff_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "t_employees",
        sa.Column("_id", sa.String(32), primary_key=True),
        sa.Column("f_Name", sa.String(30), nullable=False),
        sa.Column("f_Email", sa.String(), nullable=False),
        sa.Column("f_MobileNo", sa.String(10), nullable=False),
        sa.Column("f_Designation", sa.String(), nullable=False),
        sa.Column("f_Gender", sa.String(), nullable=False),
        sa.Column("f_Course", sa.String(), nullable=False),
        sa.Column("f_Image", sa.String(), nullable=False),
        sa.Column("f_CreateDate", sa.String(), nullable=False),
    )
    op.create_index("ix_t_employees_email", "t_employees", ["f_Email"], unique=True)

    op.create_table(
        "t_admins",
        sa.Column("_id", sa.String(32), primary_key=True),
        sa.Column("f_userName", sa.String(30), nullable=False),
        sa.Column("f_Pwd", sa.String(), nullable=False),
    )
    op.create_index("ix_t_admins_f_userName", "t_admins", ["f_userName"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_t_admins_f_userName", table_name="t_admins")
    op.drop_table("t_admins")
    op.drop_index("ix_t_employees_email", table_name="t_employees")
    op.drop_table("t_employees")
