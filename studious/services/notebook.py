import itertools
import logging
from typing import Dict, List, Optional

from studious.models.note import Note
from studious.models.validation import OperationResult, Reason
from studious.services.text_filter import InputValidator

logger = logging.getLogger(__name__)

TEMPLATES: Dict[str, str] = {
    "html": """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Document</title>
</head>
<body>
  <!-- Your content here -->
</body>
</html>""",
    "java": """// Import statements go here (optional)
import java.util.*;

public class Main {
  public static void main(String[] args) {
    // Your code here
    System.out.println("Hello, Java!");
  }
}""",
    "cpp": """#include <iostream>
using namespace std;

int main() {
  // Your code here
  cout << "Hello, C++!" << endl;
  return 0;
}""",
}


class NoteNotFound(ValueError):
    def __init__(self, note_id: int):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class NoteBook:
    def __init__(self, validator: InputValidator):
        self.validator = validator
        self._notes: List[Note] = []
        self._ids = itertools.count(1)

    def list_notes(self) -> List[Note]:
        return list(self._notes)

    def _index_of(self, note_id: int) -> int:
        for idx, note in enumerate(self._notes):
            if note.id == note_id:
                return idx
        raise NoteNotFound(note_id)

    def get_note(self, note_id: int) -> Note:
        return self._notes[self._index_of(note_id)]

    def create_note(self) -> Note:
        note = Note(id=next(self._ids), title="Untitled", content="")
        self._notes.append(note)
        logger.info(f"Created note {note.id}")
        return note

    def update_note(self, note_id: int, title: Optional[str] = None, content: Optional[str] = None) -> OperationResult:
        idx = self._index_of(note_id)

        if title is not None:
            result = self.validator.validate(title, field="title")
            if not result.ok:
                return OperationResult.from_validation(result)

        # Note bodies come from a code editor (see TEMPLATES), so markup and
        # braces are allowed there and an empty body is fine.
        if content and self.validator.profanity.contains_profanity(content):
            logger.info(f"Rejected content of note {note_id}: profanity")
            return OperationResult.rejected(Reason.PROFANITY, field="content")

        changes = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content
        self._notes[idx] = self._notes[idx].model_copy(update=changes)
        return OperationResult.success()

    def apply_template(self, note_id: int, kind: str) -> Note:
        if kind not in TEMPLATES:
            raise ValueError(f"Unknown template '{kind}'")
        idx = self._index_of(note_id)
        self._notes[idx] = self._notes[idx].model_copy(update={"content": TEMPLATES[kind]})
        logger.info(f"Applied {kind} template to note {note_id}")
        return self._notes[idx]

    def delete_note(self, note_id: int):
        idx = self._index_of(note_id)
        del self._notes[idx]
        logger.info(f"Deleted note {note_id}")
