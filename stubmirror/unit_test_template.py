"""Adapter over Jinja2 for rendering the unit-test template file."""

from pathlib import Path

import jinja2

from stubmirror.errors import TemplateRenderError
from stubmirror.unit_test_record import UnitTestRecord


class UnitTestTemplate:
    """Loads the template file once and renders it per source file.

    The template text is registered under the project name. Placeholders use
    the ``{{ name }}`` syntax; any placeholder without data is an error.
    """

    def __init__(self, path: str | Path) -> None:
        """Remember the template location; the file is read on first render."""
        self.path = Path(path)
        self._loader = jinja2.DictLoader({})
        self._environment = jinja2.Environment(
            loader=self._loader,
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._source: str | None = None

    @property
    def extension(self) -> str:
        """Return the template's own extension, e.g. ``.swift``."""
        return self.path.suffix

    def render(self, record: UnitTestRecord) -> str:
        """Render the template with the record's fields."""
        name = record.project_name
        if name not in self._loader.mapping:
            self._loader.mapping[name] = self._read()
        try:
            template = self._environment.get_template(name)
            return template.render(record.as_context())
        except jinja2.TemplateError as exc:
            msg = f"Cannot render template ({exc})"
            raise TemplateRenderError(self.path, msg) from exc

    def _read(self) -> str:
        if self._source is None:
            try:
                self._source = self.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Cannot read template ({exc})"
                raise TemplateRenderError(self.path, msg) from exc
        return self._source
