#!/usr/bin/env python3
"""
Interfaz CLI para Pepito Gist
Sube uno o más archivos (o STDIN) como un Gist de GitHub
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config.settings import get_settings
from ..core import Gist, GistFile
from ..exceptions import ApiError, ConfigurationError, NetworkError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def gist_url(body: str) -> str:
    """Devuelve html_url si la respuesta es JSON que lo contiene; si no, el cuerpo tal cual."""
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict) and data.get('html_url'):
        return data['html_url']
    return body


class CLI:
    """Interfaz de línea de comandos principal"""

    def setup_parser(self) -> argparse.ArgumentParser:
        """Configura el parser de argumentos"""
        parser = argparse.ArgumentParser(
            prog='pepito-gist',
            description="Pepito Gist - Crea Gists de GitHub desde archivos o STDIN",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Ejemplos de uso:
  %(prog)s notas.txt script.py
  %(prog)s --public ~/src/ejemplo.rs
  echo "hola" | %(prog)s --anonymous -n saludo.txt
            """
        )
        parser.add_argument(
            '--debug', action='store_true', help='Imprime cabeceras y tamaño del payload enviado'
        )
        parser.add_argument(
            '-p', '--public', action='store_true', help='Gist público (por defecto es secreto)'
        )
        parser.add_argument(
            '-a', '--anonymous', action='store_true', help='No enviar el token de GitHub'
        )
        parser.add_argument(
            '-n', '--name', default='gistfile1.txt',
            help='Nombre del archivo cuando el contenido viene de STDIN (por defecto: gistfile1.txt)'
        )
        parser.add_argument(
            'files', nargs='*', help='Archivos a subir; sin archivos se lee STDIN'
        )
        return parser

    def build_gist(self, args) -> Gist:
        """Crea el Gist y carga los archivos pedidos (o STDIN)."""
        gist = Gist(public=args.public, anonymous=args.anonymous)
        if args.files:
            for path in args.files:
                f = GistFile(path)
                f.read_file()
                gist.add_file(f)
        else:
            f = GistFile(args.name)
            f.read_stdin()
            gist.add_file(f)
        return gist

    def run_create(self, args) -> int:
        try:
            gist = self.build_gist(args)
        except ConfigurationError as e:
            print(f"❌ Error de configuración: {e}")
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Error leyendo archivo: {e}")
            return 1

        if gist.is_empty():
            print("❌ No hay archivos para subir")
            return 1

        try:
            body = gist.create()
        except NetworkError as e:
            print(f"❌ Error de red: {e}")
            return 1
        except ApiError as e:
            print(f"❌ Error creando Gist: {e}")
            return 1

        print("✅ Gist creado:")
        print(gist_url(body))
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Ejecuta la interfaz CLI"""
        parser = self.setup_parser()
        args = parser.parse_args(argv)
        try:
            setup_logging(args.debug)
        except ConfigurationError as e:
            print(f"❌ Error de configuración: {e}")
            return 1
        logger.debug(f"Argumentos: {args}")
        return self.run_create(args)


def main():
    """Función principal"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
