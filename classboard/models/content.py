"""Content item model and the fixed content categories."""
from dataclasses import dataclass, asdict
from typing import Optional

SLIDES = 'slides'
ASSIGNMENTS = 'assignments'
LINKS = 'links'
ANNOUNCEMENTS = 'announcements'

CATEGORIES = (SLIDES, ASSIGNMENTS, LINKS, ANNOUNCEMENTS)

# Categories an admin can attach an uploaded file to
FILE_CATEGORIES = (SLIDES, ASSIGNMENTS)

FOLDERS = {
    SLIDES: {'name': 'Slides', 'icon': 'bi-file-earmark-slides',
             'description': 'Lecture slides and presentations'},
    ASSIGNMENTS: {'name': 'Assignments', 'icon': 'bi-clipboard-check',
                  'description': 'Homework and project assignments'},
    LINKS: {'name': 'Links', 'icon': 'bi-link-45deg',
            'description': 'Useful resources and external links'},
    ANNOUNCEMENTS: {'name': 'Announcements', 'icon': 'bi-megaphone',
                    'description': 'Important class announcements'},
}


@dataclass
class ContentItem:
    id: str
    type: str
    uploaded_by: str = ''
    date: str = ''
    name: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    due_date: Optional[str] = None
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    mime_type: Optional[str] = None

    @property
    def display_name(self):
        return self.name or self.title or ''

    @classmethod
    def from_record(cls, item_id, data, category):
        """
        Build an item from a stored document.

        The category the document was read from always wins over any
        ``type`` stored in the document itself; the stored value is kept as
        ``mime_type`` for uploaded files.
        """
        uploaded_by = data.get('uploadedBy')
        if uploaded_by is None:
            uploaded_by = data.get('uploadedby')
        return cls(
            id=str(item_id),
            type=category,
            uploaded_by=uploaded_by or '',
            date=data.get('date') or '',
            name=data.get('name'),
            title=data.get('title'),
            content=data.get('content'),
            url=data.get('url'),
            due_date=data.get('dueDate'),
            file_name=data.get('fileName'),
            file_url=data.get('fileUrl'),
            mime_type=data.get('type'),
        )

    def to_dict(self):
        data = asdict(self)
        data['display_name'] = self.display_name
        return data


def new_record(uploaded_by, date, **fields):
    """Document written to the backend for a new item (camelCase keys, no Nones)."""
    keys = {
        'name': 'name',
        'title': 'title',
        'content': 'content',
        'url': 'url',
        'due_date': 'dueDate',
        'file_name': 'fileName',
        'file_url': 'fileUrl',
        'type': 'type',
    }
    record = {'uploadedBy': uploaded_by, 'date': date}
    for attr, value in fields.items():
        if value is None or value == '':
            continue
        record[keys[attr]] = value
    return record
