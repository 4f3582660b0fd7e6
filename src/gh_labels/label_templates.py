"""Label template catalog.

A template is a JSON array of {"name", "color", "description"} objects. The
bundled "default" template ships with the package; users add their own by
dropping *.json files into the templates directory. The output of
`gh-labels get-labels` is a valid template.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from gh_labels.errors import PublicError
from gh_labels.gateway.github.types import Label

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "default"
BUNDLED_DEFAULT_PATH = Path(__file__).parent / "labels" / "default.json"

_LABELS_ADAPTER = TypeAdapter(list[Label])


class LabelTemplateCatalog:
    """Lists and loads label templates from the bundled set and a user directory."""

    def __init__(self, templates_dir: Path) -> None:
        self._templates_dir = templates_dir

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    def list_templates(self) -> list[str]:
        """Return template names, "default" first, then user templates sorted."""
        names = [DEFAULT_TEMPLATE_NAME]
        if self._templates_dir.is_dir():
            user_names = sorted(
                path.stem
                for path in self._templates_dir.glob("*.json")
                if path.is_file() and path.stem != DEFAULT_TEMPLATE_NAME
            )
            names.extend(user_names)
        return names

    def load_template(self, name: str) -> list[Label]:
        """Load the labels of a template.

        An unreadable or malformed user template is reported as a warning in
        the log and the bundled default is returned instead.

        Raises:
            PublicError: If no template with this name exists
        """
        user_path = self._templates_dir / f"{name}.json"
        if user_path.is_file():
            try:
                return parse_labels(user_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as error:
                logger.warning(
                    "Invalid label template %s (%s); using the default template", user_path, error
                )
                return load_bundled_default()

        if name == DEFAULT_TEMPLATE_NAME:
            return load_bundled_default()

        raise PublicError(f"Label template not found: {name}")


def load_bundled_default() -> list[Label]:
    return parse_labels(BUNDLED_DEFAULT_PATH.read_text(encoding="utf-8"))


def parse_labels(content: str) -> list[Label]:
    """Parse and validate a template document.

    Raises:
        ValueError: If the content is not a JSON array of labels
    """
    try:
        return _LABELS_ADAPTER.validate_json(content)
    except ValidationError as error:
        raise ValueError(f"{error.error_count()} validation error(s)") from error


def labels_to_json(labels: list[Label]) -> str:
    """Serialize labels as a template document (2-space indent)."""
    return json.dumps(
        [
            {"name": label.name, "color": label.color, "description": label.description}
            for label in labels
        ],
        indent=2,
        ensure_ascii=False,
    )


def save_labels(path: Path, labels: list[Label]) -> None:
    """Write labels to path as a template, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(labels_to_json(labels) + "\n", encoding="utf-8")
