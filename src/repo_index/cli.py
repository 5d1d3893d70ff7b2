"""Command-line interface for repo-index.

Commands:
    - render: Print the index page for a path
    - serve: Serve index pages over HTTP

The storage backend defaults to the REPO_INDEX_* environment settings;
command-line options override them.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .core.config import Settings, settings
from .http import SliceIndex
from .storage import Storage, create_storage

app = typer.Typer(
    name="repo-index",
    help="Browsable index pages over a key-value object store.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"repo-index {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Repo-Index: HTML directory listings over local or S3 storage.
    """
    pass


StorageTypeOption = Annotated[
    Optional[str],
    typer.Option(
        "--storage-type",
        "-t",
        help="Storage type: memory, fs, or s3",
        case_sensitive=False,
    ),
]
BasePathOption = Annotated[
    Optional[str], typer.Option("--base-path", help="Base directory for fs storage")
]
BucketOption = Annotated[
    Optional[str], typer.Option("--bucket", help="S3 bucket name (for s3 storage)")
]
KeyPrefixOption = Annotated[
    Optional[str],
    typer.Option("--key-prefix", help="Object key prefix inside the bucket"),
]
AccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", help="AWS access key ID (for s3 storage)"),
]
SecretKeyOption = Annotated[
    Optional[str],
    typer.Option("--secret-access-key", help="AWS secret access key (for s3 storage)"),
]
SessionTokenOption = Annotated[
    Optional[str],
    typer.Option("--session-token", help="AWS session token (for s3 storage)"),
]
RegionOption = Annotated[
    Optional[str], typer.Option("--region", help="AWS region name (for s3 storage)")
]
EndpointOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]
ProfileOption = Annotated[
    Optional[str],
    typer.Option("--aws-profile", help="AWS CLI profile name (for s3 storage)"),
]


def _create_storage(
    storage_type: Optional[str] = None,
    base_path: Optional[str] = None,
    bucket: Optional[str] = None,
    key_prefix: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
) -> Storage:
    """Create the storage backend from settings and option overrides."""
    overrides = {
        "storage_type": storage_type,
        "base_path": base_path,
        "s3_bucket": bucket,
        "s3_key_prefix": key_prefix,
        "s3_region_name": region_name,
        "s3_endpoint_url": endpoint_url,
        "s3_aws_profile": aws_profile,
    }
    config = Settings.model_validate(
        {
            **settings.model_dump(),
            **{name: value for name, value in overrides.items() if value is not None},
        }
    )
    return create_storage(
        config,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
    )


@app.command("render")
def render_cmd(
    path: Annotated[str, typer.Argument(help="Path to render the index for")] = "/",
    storage_type: StorageTypeOption = None,
    base_path: BasePathOption = None,
    bucket: BucketOption = None,
    key_prefix: KeyPrefixOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Print the index page for PATH.

    Examples:
        fs: repo-index render /simple --storage-type fs --base-path /srv/pypi
        S3: repo-index render / --storage-type s3 --bucket packages \
            --aws-profile myprofile
    """
    try:
        storage = _create_storage(
            storage_type=storage_type,
            base_path=base_path,
            bucket=bucket,
            key_prefix=key_prefix,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )
        if not path.startswith("/"):
            path = f"/{path}"

        response = SliceIndex(storage).response(f"GET {path} HTTP/1.1")
        typer.echo(response.body.decode("utf-8"))

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("serve")
def serve_cmd(
    host: Annotated[
        Optional[str], typer.Option("--host", help="Interface to bind")
    ] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to bind")] = None,
    storage_type: StorageTypeOption = None,
    base_path: BasePathOption = None,
    bucket: BucketOption = None,
    key_prefix: KeyPrefixOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    Serve index pages over HTTP.

    Examples:
        repo-index serve --storage-type fs --base-path /srv/pypi --port 8080
    """
    import uvicorn

    from .http.app import create_app

    try:
        storage = _create_storage(
            storage_type=storage_type,
            base_path=base_path,
            bucket=bucket,
            key_prefix=key_prefix,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    uvicorn.run(
        create_app(storage),
        host=host or settings.host,
        port=port or settings.port,
    )


if __name__ == "__main__":
    app()
