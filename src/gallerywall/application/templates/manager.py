"""Template manager for starter configurations and gallery templates.

Starter configurations are bundled JSON layout files that ``templates init``
copies next to the user. Gallery templates are the built-in freeform
arrangements a gallery layout can be generated from.
"""

from importlib import resources
from pathlib import Path

from gallerywall.domain.services import BUILT_IN_TEMPLATES, GalleryTemplate, get_template


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Starter configuration metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "row": "Row of three frames at gallery eye level",
    "grid": "3 x 3 grid with dual hooks",
    "above-sofa": "Frames spread evenly above a sofa",
    "salon": "Salon-style gallery wall from the salon-6 template",
    "metric-grid": "2 x 2 grid measured in centimetres",
}


class TemplateManager:
    """Manager for bundled starter configurations and gallery templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("above-sofa", Path("living-room.json"))
    """

    def __init__(self) -> None:
        self._data_package = "gallerywall.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List starter configurations as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a starter configuration.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path, force: bool = False) -> None:
        """Copy a starter configuration to ``output_path``.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and ``force`` is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not force:
            raise FileExistsError(f"File already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def list_gallery_templates(self) -> list[GalleryTemplate]:
        """List the built-in gallery templates."""
        return list(BUILT_IN_TEMPLATES)

    def get_gallery_template(self, template_id: str) -> GalleryTemplate:
        """Look up a built-in gallery template.

        Raises:
            TemplateNotFoundError: If no gallery template has this id.
        """
        template = get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template
