"""a7p-server command line.

- serve: run the HTTP(S) file service
- dump: print the JSON document of one .a7p file
"""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from a7p_server.config import load_config
from a7p_server.domain.errors import ProfileFileError
from a7p_server.features.files.service import ProfileFilesService
from a7p_server.main import create_app

app = typer.Typer(name="a7p-server", help="Local .a7p profile file server")

logger = logging.getLogger(__name__)


@app.command()
def serve(
    files_dir: Optional[Path] = typer.Option(None, "--dir", help="Directory to serve .a7p files from"),
    static_dir: Optional[Path] = typer.Option(None, "--static", help="Directory of static files mounted at /"),
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind"),
    cert_file: Optional[Path] = typer.Option(None, "--cert", help="Path to the certificate file"),
    key_file: Optional[Path] = typer.Option(None, "--key", help="Path to the key file"),
    insecure: bool = typer.Option(False, "--insecure", help="Serve plain HTTP instead of HTTPS"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Serve the file API (and optional static files)."""
    overrides = {
        "files_dir": files_dir,
        "static_dir": static_dir,
        "host": host,
        "port": port,
        "cert_file": cert_file,
        "key_file": key_file,
        "log_level": log_level.upper() if log_level else None,
    }
    cfg = dataclasses.replace(load_config(), **{k: v for k, v in overrides.items() if v is not None})
    if insecure:
        cfg = dataclasses.replace(cfg, cert_file=None, key_file=None)

    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    ssl_args = {}
    if cfg.tls_enabled:
        for path in (cfg.cert_file, cfg.key_file):
            if not path.is_file():
                typer.echo(f"Error: {path} not found (use --insecure to serve plain HTTP)", err=True)
                raise typer.Exit(1)
        ssl_args = {"ssl_certfile": str(cfg.cert_file), "ssl_keyfile": str(cfg.key_file)}

    scheme = "https" if ssl_args else "http"
    logger.info("serving %s at %s://%s:%d/", cfg.files_dir, scheme, cfg.host, cfg.port)
    uvicorn.run(create_app(cfg), host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower(), **ssl_args)


@app.command()
def dump(path: Path = typer.Argument(..., help=".a7p file to print")) -> None:
    """Print the JSON document stored in an .a7p file."""
    service = ProfileFilesService(files_dir=path.parent)
    try:
        typer.echo(service.load(filename=path.name))
    except ProfileFileError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
