"""
Entrypoint da aplicação.

Uso:
  python app.py migrate --db painel_estoque.db
  python app.py importar produtos.xlsx
  python app.py produtos --busca parafuso --status critico
  python app.py nivel-minimo P001 12.5
  python app.py analise
  python app.py tui
"""

from painel_estoque.adapters.cli import main

if __name__ == "__main__":
    main()
