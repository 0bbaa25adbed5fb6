"""speclint -- lint API definitions against a remote linting service.

This package submits an OpenAPI/Swagger document (a local file or a URL, in
JSON or YAML) to a linting service, decodes the reported rule violations,
and renders them grouped by severity. The run fails when at least one
``MUST`` violation is reported.

Typical usage::

    speclint lint openapi.yaml
    speclint --linter-service https://lint.example.com lint api.json --format markdown

Modules:
    app: Typer application and CLI entry point.
    lint: Orchestration of the locate/read/submit/render pipeline.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr discipline with Rich support.
"""

__version__ = "0.1.0"
