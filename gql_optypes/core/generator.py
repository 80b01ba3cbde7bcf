"""Code generator for operation result types.

Synthesizes declarations, prints them with the configured dialect and
renders the Jinja2 output template.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(schema, document, config, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
import os
from pathlib import Path

from graphql import DocumentNode, GraphQLSchema
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import SynthesisConfig
from .ir import Declaration
from .renderers import Renderer, get_renderer
from .synthesizer import synthesize

log = logging.getLogger(__name__)

TEMPLATE_NAME = "operations.j2"


class CodeGenerator:
    """Generates a type definition file from a schema and its documents.

    The template receives ``header``, ``preamble`` (dialect helpers, e.g.
    Flow's ``$Pick``) and ``declarations`` (rendered strings, in order).
    A file named ``operations.j2`` in template_dir replaces the built-in one.

    Example:
        generator = CodeGenerator(schema, document, SynthesisConfig(dialect="flow"))
        generator.generate("./src/operations.js")
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        document: DocumentNode,
        config: SynthesisConfig | None = None,
        template_dir: str | None = None,
        header: str | None = None,
    ):
        """Initialize the code generator.

        Args:
            schema: The schema the documents are written against
            document: All operations and fragments, merged
            config: Synthesis and dialect options
            template_dir: Optional directory with a custom output template
            header: Optional text placed at the top of the output
        """
        self.schema = schema
        self.document = document
        self.config = config or SynthesisConfig()
        self.header = header
        self.renderer: Renderer = get_renderer(self.config)
        self.declarations: tuple[Declaration, ...] = ()

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_optypes", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
        )

    def generate_code(self) -> str:
        """Synthesize and render the complete output."""
        self.declarations = synthesize(self.schema, self.document, self.config)
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(
            header=self.header,
            preamble=self.renderer.preamble,
            declarations=[self.renderer.render_declaration(d) for d in self.declarations],
        )

    def generate(self, output_path: str) -> str:
        """Render and write the output file. Returns the written code."""
        code = self.generate_code()
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(code)
        log.debug("Wrote %d declarations to %s", len(self.declarations), output_path)
        return code
