from flask_wtf import FlaskForm
from wtforms import DateField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional


class TaskForm(FlaskForm):
    title = StringField('Title', validators=[DataRequired(), Length(max=200)])
    description = TextAreaField('Description')
    due_date = DateField('Due Date', format='%Y-%m-%d', validators=[Optional()])

    def to_payload(self):
        return {
            "title": self.title.data,
            "description": self.description.data,
            "dueDate": self.due_date.data,
        }


class ActionForm(FlaskForm):
    """CSRF-only form backing the toggle and delete buttons."""
