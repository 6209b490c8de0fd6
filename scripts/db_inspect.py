import os
import sys

# ensure project root is on sys.path so `import summarizer` works when running this script
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("SKIP_CREATE_ALL", "1")

from summarizer import create_app
from summarizer.models import Transcript, Summary, EmailLog

LATEST = 5


def inspect():
    print('transcripts:', Transcript.query.count())
    for t in Transcript.query.order_by(Transcript.uploaded_at.desc()).limit(LATEST):
        print('  ', t.to_listing())
    print('summaries:', Summary.query.count())
    for s in Summary.query.order_by(Summary.created_at.desc()).limit(LATEST):
        print('  ', s.to_listing())
    print('email_logs:', EmailLog.query.count(),
          '(failed: %d)' % EmailLog.query.filter_by(status='failed').count())
    for log in EmailLog.query.order_by(EmailLog.sent_at.desc()).limit(LATEST):
        d = log.to_dict()
        d.pop('emailContent')
        print('  ', d)


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        print(f"=== {app.config['SQLALCHEMY_DATABASE_URI']} ===")
        inspect()
    print('\nDone.')
