"""init academy tables

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

# Enums
user_role_enum = sa.Enum("admin", "editor", "user", name="userrole")
instructor_level_enum = sa.Enum("junior", "regular", "senior", "master", name="instructorlevel")
instructor_status_enum = sa.Enum("active", "inactive", name="instructorstatus")
program_status_enum = sa.Enum("draft", "published", "upcoming", "archived", name="programstatus")
schedule_status_enum = sa.Enum("upcoming", "ongoing", "completed", "cancelled", name="schedulestatus")
post_status_enum = sa.Enum("draft", "published", "archived", name="poststatus")
page_status_enum = sa.Enum("draft", "published", name="pagestatus")
contact_status_enum = sa.Enum("unread", "read", "replied", "archived", name="contactstatus")
subscriber_status_enum = sa.Enum("active", "unsubscribed", "bounced", name="subscriberstatus")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    # Users (post authors)
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("avatar", sa.String(500), nullable=True),
        sa.Column("role", user_role_enum, nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Taxonomy
    op.create_table(
        "program_categories",
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "parent_id",
            sa.Integer(),
            sa.ForeignKey("program_categories.id"),
            nullable=True,
        ),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_program_categories_slug", "program_categories", ["slug"], unique=True)
    op.create_index("ix_program_categories_parent_id", "program_categories", ["parent_id"])

    op.create_table(
        "post_categories",
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_post_categories_slug", "post_categories", ["slug"], unique=True)

    # Instructors
    op.create_table(
        "instructors",
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("level", instructor_level_enum, nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("photo", sa.String(500), nullable=True),
        sa.Column("status", instructor_status_enum, nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_instructors_slug", "instructors", ["slug"], unique=True)

    # Programs
    op.create_table(
        "programs",
        *_timestamps(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("program_categories.id"),
            nullable=True,
        ),
        sa.Column(
            "instructor_id",
            sa.Integer(),
            sa.ForeignKey("instructors.id"),
            nullable=True,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image", sa.String(500), nullable=True),
        sa.Column("duration", sa.String(100), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("max_participants", sa.Integer(), nullable=True),
        sa.Column("requirements", sa.Text(), nullable=True),
        sa.Column("benefits", sa.JSON(), nullable=False),
        sa.Column("certificate", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("status", program_status_enum, nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
    )
    op.create_index("ix_programs_slug", "programs", ["slug"], unique=True)
    op.create_index("ix_programs_category_id", "programs", ["category_id"])
    op.create_index("ix_programs_instructor_id", "programs", ["instructor_id"])
    op.create_index("ix_programs_status", "programs", ["status"])

    op.create_table(
        "schedules",
        *_timestamps(),
        sa.Column(
            "program_id",
            sa.Integer(),
            sa.ForeignKey("programs.id"),
            nullable=False,
        ),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("max_participants", sa.Integer(), nullable=False, server_default="20"),
        sa.Column("registered_participants", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("price", sa.Numeric(12, 2), nullable=True),
        sa.Column("status", schedule_status_enum, nullable=False),
    )
    op.create_index("ix_schedules_program_id", "schedules", ["program_id"])
    op.create_index("ix_schedules_start_date", "schedules", ["start_date"])
    op.create_index("ix_schedules_status", "schedules", ["status"])

    # Posts
    op.create_table(
        "posts",
        *_timestamps(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("featured_image", sa.String(500), nullable=True),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("post_categories.id"),
            nullable=True,
        ),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("status", post_status_enum, nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
    )
    op.create_index("ix_posts_slug", "posts", ["slug"], unique=True)
    op.create_index("ix_posts_category_id", "posts", ["category_id"])
    op.create_index("ix_posts_author_id", "posts", ["author_id"])
    op.create_index("ix_posts_status", "posts", ["status"])
    op.create_index("ix_posts_published_at", "posts", ["published_at"])

    # Pages
    op.create_table(
        "pages",
        *_timestamps(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("template", sa.String(50), nullable=False, server_default="default"),
        sa.Column("status", page_status_enum, nullable=False),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
    )
    op.create_index("ix_pages_slug", "pages", ["slug"], unique=True)

    # Contact messages
    op.create_table(
        "contacts",
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", contact_status_enum, nullable=False),
        sa.Column("ip_address", sa.String(45), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("replied_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_contacts_email", "contacts", ["email"])
    op.create_index("ix_contacts_status", "contacts", ["status"])

    # Newsletter
    op.create_table(
        "newsletter_subscribers",
        *_timestamps(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("status", subscriber_status_enum, nullable=False),
        sa.Column("token", sa.String(64), nullable=True, unique=True),
        sa.Column("subscribed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("unsubscribed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_newsletter_subscribers_email", "newsletter_subscribers", ["email"], unique=True
    )
    op.create_index("ix_newsletter_subscribers_status", "newsletter_subscribers", ["status"])


def downgrade() -> None:
    op.drop_table("newsletter_subscribers")
    op.drop_table("contacts")
    op.drop_table("pages")
    op.drop_table("posts")
    op.drop_table("schedules")
    op.drop_table("programs")
    op.drop_table("instructors")
    op.drop_table("post_categories")
    op.drop_table("program_categories")
    op.drop_table("users")

    for enum in (
        subscriber_status_enum,
        contact_status_enum,
        page_status_enum,
        post_status_enum,
        schedule_status_enum,
        program_status_enum,
        instructor_status_enum,
        instructor_level_enum,
        user_role_enum,
    ):
        enum.drop(op.get_bind(), checkfirst=True)
