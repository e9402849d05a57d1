"""
Comment Model
"""

from app.extensions import db


class Comment(db.Model):
    """Visitor comment left on the site"""
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    author = db.Column(db.String(80), nullable=False)
    body = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def __repr__(self):
        return f'<Comment {self.id} by {self.author}>'
