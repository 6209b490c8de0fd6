"""create transcripts, summaries and email_logs

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'transcripts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('filename', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_transcripts_uploaded_at', 'transcripts', ['uploaded_at'])

    op.create_table(
        'summaries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('transcript_id', sa.Integer(), sa.ForeignKey('transcripts.id', ondelete='SET NULL'), nullable=True),
        sa.Column('original_transcript', sa.Text(), nullable=False),
        sa.Column('custom_prompt', sa.Text(), nullable=False),
        sa.Column('ai_summary', sa.Text(), nullable=False),
        sa.Column('edited_summary', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_summaries_transcript_id', 'summaries', ['transcript_id'])
    op.create_index('ix_summaries_created_at', 'summaries', ['created_at'])

    op.create_table(
        'email_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('summary_id', sa.Integer(), sa.ForeignKey('summaries.id'), nullable=False),
        sa.Column('recipients', sa.JSON(), nullable=False),
        sa.Column('subject', sa.Text(), nullable=False),
        sa.Column('email_content', sa.Text(), nullable=False),
        sa.Column('sent_at', sa.DateTime(), nullable=False),
        sa.Column('status', sa.Enum('sent', 'failed', name='email_status'), nullable=False),
        sa.Column('error_message', sa.Text(), nullable=True),
    )
    op.create_index('ix_email_logs_summary_id', 'email_logs', ['summary_id'])


def downgrade() -> None:
    op.drop_index('ix_email_logs_summary_id', table_name='email_logs')
    op.drop_table('email_logs')
    sa.Enum(name='email_status').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_summaries_created_at', table_name='summaries')
    op.drop_index('ix_summaries_transcript_id', table_name='summaries')
    op.drop_table('summaries')
    op.drop_index('ix_transcripts_uploaded_at', table_name='transcripts')
    op.drop_table('transcripts')
