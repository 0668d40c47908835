"""
TUI (Text User Interface) do painel de estoque usando Rich.

Interface interativa baseada em menus:
- Listagem de produtos com busca e filtro por status
- Análise do estoque (resumo, ranking, distribuição, destaques)
- Configuração do nível mínimo
- Importação de planilhas e migrações
"""

from __future__ import annotations

import os
from typing import List, Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt

from painel_estoque.config import DB_PATH
from painel_estoque.domain.models import ProdutoLike
from painel_estoque.domain.status import FILTRO_TODOS, STATUS_CONFIG
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.adapters.render import display_analise, display_produtos
from painel_estoque.usecases.analise_estoque import gerar_analise
from painel_estoque.usecases.filtrar_produtos import filtrar_produtos
from painel_estoque.usecases.importar_produtos import run_importar
from painel_estoque.usecases.nivel_minimo import NivelMinimoInvalido, atualizar_nivel_minimo


class PainelTUI:
    """Text User Interface para o painel de estoque."""

    def __init__(self, db_path: str = DB_PATH, console: Optional[Console] = None):
        self.console = console or Console()
        self.db_path = db_path
        self.repo = ProdutoRepo(db_path)
        self.produtos: List[ProdutoLike] = []
        self.busca = ""
        self.status = FILTRO_TODOS

    def run(self) -> None:
        """Inicia a interface principal."""
        self.show_banner()
        self.aplicar_migracoes()
        self.carregar_dados()

        while True:
            try:
                choice = self.show_main_menu()
                if choice == "1":
                    self.visao_lista()
                elif choice == "2":
                    self.visao_analise()
                elif choice == "3":
                    self.configurar_nivel_minimo()
                elif choice == "4":
                    self.importar_planilha()
                elif choice == "5":
                    self.carregar_dados()
                elif choice == "0":
                    self.console.print("\n[green]Saindo do painel...[/green]")
                    break
            except KeyboardInterrupt:
                self.console.print("\n[red]Saindo...[/red]")
                break
            except Exception as e:
                self.console.print(f"[red]Erro: {e}[/red]")

    def show_banner(self) -> None:
        banner = Panel.fit(
            "[bold blue]PAINEL DE ESTOQUE[/bold blue]\n"
            "[cyan]Produtos, níveis mínimos e análise[/cyan]",
            border_style="blue"
        )
        self.console.print("\n")
        self.console.print(Align.center(banner))
        self.console.print("\n")

    def show_main_menu(self) -> str:
        menu = Panel(
            "[bold]MENU PRINCIPAL[/bold]\n\n"
            "[yellow]1.[/yellow] Lista de Produtos\n"
            "[yellow]2.[/yellow] Análise do Estoque\n"
            "[yellow]3.[/yellow] Configurar Nível Mínimo\n"
            "[yellow]4.[/yellow] Importar Planilha\n"
            "[yellow]5.[/yellow] Recarregar Dados\n"
            "[yellow]0.[/yellow] Sair\n",
            title="Opções",
            border_style="green"
        )
        self.console.print(menu)
        return Prompt.ask("Escolha uma opção", choices=["0", "1", "2", "3", "4", "5"], console=self.console)

    def aplicar_migracoes(self) -> None:
        apply_migrations(self.db_path)

    def carregar_dados(self) -> None:
        """Recarrega a lista de produtos do banco."""
        try:
            with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
                          console=self.console, transient=True) as progress:
                progress.add_task("Carregando produtos...", total=None)
                self.produtos = self.repo.get_all()
        except Exception as e:
            self.produtos = []
            self.console.print(f"[red]Erro ao carregar os dados: {e}[/red]")

    def produtos_filtrados(self) -> List[ProdutoLike]:
        return filtrar_produtos(self.produtos, self.busca, self.status)

    def visao_lista(self) -> None:
        self.busca = Prompt.ask("Buscar por código ou descrição", default=self.busca, console=self.console)
        self.status = Prompt.ask(
            "Filtrar por status",
            choices=[FILTRO_TODOS, *STATUS_CONFIG],
            default=self.status,
            console=self.console,
        )
        display_produtos(self.console, self.produtos_filtrados())

    def visao_analise(self) -> None:
        # a análise considera todos os produtos, sem os filtros da lista
        display_analise(self.console, gerar_analise(self.produtos))

    def configurar_nivel_minimo(self) -> None:
        produto_id = Prompt.ask("ID do produto", console=self.console)
        atual = next((p for p in self.produtos if str(p.get("id")) == produto_id), None)
        if atual is None:
            self.console.print(f"[red]Produto não encontrado: {produto_id}[/red]")
            return
        self.console.print(f"Ajuste o nível mínimo de estoque para o produto [bold]{atual.get('descricao') or ''}[/bold].")
        valor = Prompt.ask(
            "Nível Mínimo",
            default="" if atual.get("nivel_minimo") is None else str(atual.get("nivel_minimo")),
            console=self.console,
        )
        try:
            nivel = atualizar_nivel_minimo(produto_id, valor, self.repo)
        except NivelMinimoInvalido as e:
            self.console.print(f"[red]{e.mensagem}[/red]")
            return
        except Exception as e:
            self.console.print(f"[red]Erro ao salvar. Verifique o valor e tente novamente. ({e})[/red]")
            return
        self.console.print(f"[green]✓ Nível mínimo atualizado para {nivel:g}[/green]")
        self.carregar_dados()

    def importar_planilha(self) -> None:
        arquivo = Prompt.ask("Caminho da planilha (XLSX/CSV) de produtos", console=self.console)
        if not os.path.exists(arquivo):
            self.console.print(f"[red]Arquivo não encontrado: {arquivo}[/red]")
            return
        try:
            resultado = run_importar(arquivo, self.db_path)
        except Exception as e:
            self.console.print(f"[red]Erro ao importar produtos: {e}[/red]")
            return
        self.console.print("\n[green]✓ Produtos importados com sucesso![/green]")
        self.console.print(f"Arquivo: {resultado['arquivo']}")
        self.console.print(f"Linhas inseridas: {resultado['linhas_inseridas']}")
        self.carregar_dados()


def main_tui(db_path: str = DB_PATH):
    """Ponto de entrada principal da TUI."""
    tui = PainelTUI(db_path)
    tui.run()


if __name__ == "__main__":
    main_tui()
