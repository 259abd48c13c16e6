"""Well-known artifact names and defaults shared across extdoc components."""

APPLICATION_DOC_FILE = "application.adoc"
CONFIGURATION_DOC_FILE = "configuration.adoc"
COMPONENTS_DIAGRAM_FILE = "components.puml"
API_SCHEMA_FILE = "openapi.json"
MODULE_DOC_PATTERN = "module-{name}.adoc"

DEFAULT_OUTPUT_SUBDIR = "spring-modulith-docs"
DEFAULT_PROPERTIES_RESOURCE = "application.properties"
DEFAULT_PROPERTIES_SEARCH_PATHS = ("src/main/resources", ".")

# Build-tool conventions: a marker file in the base directory selects the root.
MAVEN_MARKER = "pom.xml"
MAVEN_BUILD_ROOT = "target"
GRADLE_BUILD_ROOT = "build"


def module_doc_file(module_name: str) -> str:
    """Return the output file name for a module."""
    return MODULE_DOC_PATTERN.format(name=module_name)
