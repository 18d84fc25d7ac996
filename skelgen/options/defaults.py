"""Built-in option schema for the Go service template.

Base options are always asked for (and required in a values file).  Extension
options are grouped by category; boolean extensions carry the list of files
that only belong in the generated project when they are enabled (``add``) or
disabled (``remove``).
"""

from __future__ import annotations

from .models import Category, Option, OptionFiles, OptionSchema
from .validators import all_of, in_range, matches, not_empty

# Option names the generator relies on directly.
TARGET_DIR_OPTION = "projectSlug"
MODULE_NAME_OPTION = "moduleName"

LICENSES: dict[int, str] = {
    1: "MIT",
    2: "Apache-2.0",
    3: "GPL-3.0",
}


BASE_OPTIONS: tuple[Option, ...] = (
    Option(
        name="projectName",
        default="Awesome Go Project",
        description="Name of the project",
        validator=not_empty(),
    ),
    Option(
        name=TARGET_DIR_OPTION,
        default="{{ projectName | slugify }}",
        description="Technical name of the project for folders and names. "
        "This will also be used as output directory.",
        validator=matches(
            r"[a-z0-9]+(-[a-z0-9]+)*",
            "only lowercase letters, digits and single dashes are allowed",
        ),
    ),
    Option(
        name="projectDescription",
        default="The awesome project provides awesome features to awesome people.",
        description="Description of the project used in the README.",
        validator=not_empty(),
    ),
    Option(
        name="appName",
        default="{{ projectSlug | replace('-', '') }}",
        description="The name of the binary that you want to create. "
        "Could be the same as your projectSlug but since Go supports multiple "
        "apps in one repo it could also be sth. else.",
        validator=matches(
            r"[a-z][a-z0-9]*",
            "must start with a letter and contain only lowercase letters and digits",
        ),
    ),
    Option(
        name=MODULE_NAME_OPTION,
        default="github.com/user/{{ projectSlug }}",
        description="The name of the Go module defined in the go.mod file. "
        "This is used if you want to go get the module.",
        validator=matches(
            r"[\w.~-]+(/[\w.~-]+)*",
            "must be a valid Go module path",
        ),
    ),
    Option(
        name="golangciVersion",
        default="1.50.1",
        description="Golangci-lint version to use.",
        validator=matches(r"\d+\.\d+\.\d+", "must be a semantic version like 1.50.1"),
    ),
)


EXTENSIONS: tuple[Category, ...] = (
    Category(
        name="openSource",
        options=(
            Option(
                name="license",
                default=1,
                description="Set an OpenSource license.\n"
                "Unsure which to pick? Checkout GitHub's https://choosealicense.com/\n"
                + "\n".join(f"  {key}: {name}" for key, name in LICENSES.items()),
                validator=in_range(min(LICENSES), max(LICENSES)),
            ),
            Option(
                name="codeowners",
                default=False,
                description="Set up a CODEOWNERS file.",
                files=OptionFiles(add=(".github/CODEOWNERS",)),
            ),
            Option(
                name="codeownersTeam",
                default="@{{ projectSlug }}-maintainers",
                description="Team or user that owns all files in the repository.",
                depends_on=("codeowners",),
                validator=all_of(not_empty(), matches(r"@\S+", "must start with @")),
            ),
        ),
    ),
    Category(
        name="ci",
        options=(
            Option(
                name="githubActions",
                default=True,
                description="Set up a GitHub Actions workflow running lint and tests.",
                files=OptionFiles(add=(".github/workflows",)),
            ),
            Option(
                name="docker",
                default=True,
                description="Add a Dockerfile to build the app into a container image.",
                files=OptionFiles(add=("Dockerfile", ".dockerignore")),
            ),
            Option(
                name="renovate",
                default=False,
                description="Add a renovate.json to keep dependencies up to date.",
                files=OptionFiles(add=("renovate.json",)),
            ),
        ),
    ),
    Category(
        name="grpc",
        options=(
            Option(
                name="grpc",
                default=False,
                description="Base configuration for gRPC (buf, protobuf definitions "
                "and a gRPC server instead of a plain HTTP server).",
                files=OptionFiles(
                    add=(
                        "api",
                        "buf.gen.yaml",
                        "buf.work.yaml",
                        "tools.go",
                        "internal/grpcserver",
                        "internal/gateway",
                    ),
                    remove=("internal/httpserver",),
                ),
            ),
            Option(
                name="grpcGateway",
                default=False,
                description="Extend gRPC configuration with grpc-gateway "
                "(REST to gRPC proxy with OpenAPI definitions).",
                depends_on=("grpc",),
                files=OptionFiles(add=("internal/gateway",)),
            ),
        ),
    ),
)


def default_schema() -> OptionSchema:
    """Return the schema used by the ``skelgen new`` command."""
    return OptionSchema(base=BASE_OPTIONS, extensions=EXTENSIONS)
