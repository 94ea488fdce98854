from studentdesk.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from studentdesk.app.models.student import Student  # noqa: F401
from studentdesk.app.models.marks import StudentMarks  # noqa: F401
from studentdesk.app.models.parents import Parents  # noqa: F401
from studentdesk.app.models.message import Message  # noqa: F401
