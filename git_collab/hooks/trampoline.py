"""
GIT-COLLAB - Post-commit Trampoline
Classifica scripts post-commit e aplica merge (install) ou strip (uninstall).

O trampoline é o corpo fixo que encaminha a execução para
`git-collab/post-commit`. Versões antigas do GIT-COLLAB (e do git-switch,
seu antecessor) usavam arquivos irmãos `post-commit.git-*`; essas variantes
são migradas quando encontradas.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..core.models import TrampolineKind


# =============================================================================
# Trampoline Bodies
# =============================================================================

POST_COMMIT_BASE = (
    '#!/usr/bin/env sh\n'
    '\n'
    '[ -f "$(dirname $0)/git-collab/post-commit" ] && . $(dirname $0)/git-collab/post-commit'
)

POST_COMMIT_BASE_OLD = '#!/bin/bash\n\n/bin/bash "$(dirname $0)"/post-commit.git-collab'

GIT_SWITCH_POST_COMMIT_BASE = '#!/bin/bash\n\n/bin/bash "$(dirname $0)"/post-commit.git-switch'

SHEBANG = "#!/usr/bin/env sh"
LEGACY_SHEBANG = "#!/bin/bash"

GIT_SWITCH_SIBLING = "post-commit.git-switch"
LEGACY_SIBLING = "post-commit.git-collab"


@dataclass
class MergeResult:
    """Conteúdo final do post-commit e arquivos irmãos que ficaram órfãos."""
    content: str
    orphaned: List[str] = field(default_factory=list)


# =============================================================================
# Classification
# =============================================================================

def classify(content: Optional[str]) -> TrampolineKind:
    """
    Identifica a variante de um script post-commit.

    Variantes legadas têm precedência para que sejam sempre migradas.

    Args:
        content: Conteúdo do arquivo (None se não existir)

    Returns:
        TrampolineKind correspondente
    """
    if content is None:
        return TrampolineKind.MISSING
    if GIT_SWITCH_POST_COMMIT_BASE in content:
        return TrampolineKind.LEGACY_GIT_SWITCH
    if POST_COMMIT_BASE_OLD in content:
        return TrampolineKind.LEGACY_OLD
    if POST_COMMIT_BASE in content:
        return TrampolineKind.CURRENT
    return TrampolineKind.FOREIGN


# =============================================================================
# Merge (install)
# =============================================================================

def _migrate_git_switch(content: str) -> Tuple[str, List[str]]:
    # Vira exatamente POST_COMMIT_BASE_OLD, tratado no próximo passo
    return content.replace("git-switch", "git-collab"), [GIT_SWITCH_SIBLING]


def _migrate_old(content: str) -> Tuple[str, List[str]]:
    return content.replace(POST_COMMIT_BASE_OLD, POST_COMMIT_BASE), [LEGACY_SIBLING]


def _prepend_current(content: str) -> Tuple[str, List[str]]:
    return POST_COMMIT_BASE + _drop_first_line(content), []


def _drop_first_line(content: str) -> str:
    """Remove a primeira linha (shebang), mantendo o newline que a termina."""
    newline = content.find("\n")
    if newline != -1:
        return content[newline:]
    if not content.strip() or content.startswith("#!"):
        return ""
    return "\n" + content


_MERGE_STEPS: Dict[TrampolineKind, Callable[[str], Tuple[str, List[str]]]] = {
    TrampolineKind.LEGACY_GIT_SWITCH: _migrate_git_switch,
    TrampolineKind.LEGACY_OLD: _migrate_old,
    TrampolineKind.FOREIGN: _prepend_current,
}


def merge_trampoline(content: Optional[str]) -> MergeResult:
    """
    Garante que o trampoline atual está presente no script.

    Cada variante é convertida na próxima até chegar em CURRENT:
    git-switch -> old -> current, foreign -> current. O conteúdo do
    usuário fora do trampoline é preservado.

    Args:
        content: Conteúdo atual do post-commit (None se não existir)

    Returns:
        MergeResult com o novo conteúdo e arquivos irmãos a remover
    """
    if content is None:
        return MergeResult(content=POST_COMMIT_BASE)

    result = MergeResult(content=content)
    kind = classify(result.content)

    while kind is not TrampolineKind.CURRENT:
        result.content, orphaned = _MERGE_STEPS[kind](result.content)
        for orphan in orphaned:
            if orphan not in result.orphaned:
                result.orphaned.append(orphan)
        kind = classify(result.content)

    # Qualquer menção ao arquivo irmão antigo o torna órfão, seja qual for a variante
    if LEGACY_SIBLING in content and LEGACY_SIBLING not in result.orphaned:
        result.orphaned.append(LEGACY_SIBLING)

    return result


# =============================================================================
# Strip (uninstall)
# =============================================================================

def strip_trampoline(content: str) -> Optional[str]:
    """
    Remove o trampoline de um script post-commit.

    Args:
        content: Conteúdo atual do post-commit

    Returns:
        Novo conteúdo, ou None se o arquivo deve ser apagado
        (continha apenas o trampoline)
    """
    if content in (POST_COMMIT_BASE, POST_COMMIT_BASE_OLD):
        return None

    content = content.replace(POST_COMMIT_BASE, SHEBANG)
    content = content.replace(POST_COMMIT_BASE_OLD, LEGACY_SHEBANG)
    return content
