"""
GIT-COLLAB - Script Templates
Scripts instalados no diretório home do GIT-COLLAB.
"""

import shlex


# =============================================================================
# Payload post-commit
# =============================================================================

AUTO_ROTATE_PLACEHOLDER = "__GIT_COLLAB_AUTO_ROTATE__"

POST_COMMIT_PAYLOAD_TEMPLATE = r"""#!/usr/bin/env sh

readonly co_authors=$(git config --global git-collab.co-authors | tr ';' '\n')
[ -z "$co_authors" ] && exit 0

readonly subject=$(git log -1 --format="%s")
readonly body=$(git log -1 --format="%b")
readonly author=$(git log -1 --format="%an <%ae>")

match_co_authors() {
  _co_author_lines=$(printf "%s\n" "$2" | wc -l)
  _body_end=$(printf "%s" "$1" | tail -n "$_co_author_lines")

  [ "$_body_end" = "$2" ]
}

match_co_authors "$body" "$co_authors" && exit 0

printf "git-collab > Author:\n  %s\n" "$author"
printf "git-collab > Co-Author(s):\n%s\n\n" "$(printf "%s" "$co_authors" | sed 's/^Co-Authored-By: /  /g')"

case "$body" in
  ""|"Co-Authored-By:"*)
    new_body=$co_authors
    ;;
  *)
    new_body=${body%%Co-Authored-By*}
    new_body=$(printf "%s\n\n%s" "$new_body" "$co_authors")
    ;;
esac

message="$(printf "%s\n\n%s" "$subject" "$new_body")"

git commit --quiet --amend --no-verify --message="$message"

printf "git-collab > Rotating author and co-author(s)\n\n"
__GIT_COLLAB_AUTO_ROTATE__
"""


def get_auto_rotate_command(executable: str, platform: str) -> str:
    """
    Monta o comando que rotaciona autores após o commit.

    Args:
        executable: Caminho do executável `git-collab`
        platform: Valor de sys.platform

    Returns:
        Linha de shell a ser colocada no fim do payload
    """
    if platform == "win32":
        escaped = executable.replace("\\", "\\\\")
        return f"start {escaped} users rotate"

    return f"{shlex.quote(executable)} users rotate > /dev/null 2>&1 &"


def get_post_commit_payload(auto_rotate: str) -> str:
    """Script que adiciona co-autores ao último commit."""
    return POST_COMMIT_PAYLOAD_TEMPLATE.replace(AUTO_ROTATE_PLACEHOLDER, auto_rotate)


# =============================================================================
# git lg (log com co-autores)
# =============================================================================

GIT_LOG_CO_AUTHOR_SCRIPT = r"""#!/usr/bin/env sh

# Pretty formatting for git logs with github's co-author support

readonly line_ifs=$(printf '\037')
readonly branch_ifs="|"
readonly begin_commit="### begin_commit ###"

commit_hash=""
date=""
branches=""
subject=""
author=""
co_authors=""

init_colors() {
  red=$(printf '\033[31m')
  green=$(printf '\033[32m')
  yellow=$(printf '\033[33m')
  blue=$(printf '\033[34m')
  magenta=$(printf '\033[35m')
  cyan=$(printf '\033[36m')
  white=$(printf '\033[37m')
  reset=$(printf '\033[0m')
}

print_branches() {
  [ -z "$branches" ] && return
  formatted_branches=""

  reset_ifs=$IFS
  IFS=$branch_ifs
  for ref in $branches; do
    [ -n "$formatted_branches" ] && formatted_branches="$formatted_branches, "

    # Remove leading spaces
    ref=${ref#"${ref%%[! ]*}"}

    case "$ref" in
      HEAD*) formatted_branches="$formatted_branches$cyan$ref$magenta";;
      tag*) formatted_branches="$formatted_branches$red$ref$magenta";;
      *) formatted_branches="$formatted_branches$ref";;
    esac
  done
  IFS=$reset_ifs

  printf "%s" "$magenta($formatted_branches)$reset"
}

print_co_authors() {
  [ -n "$co_authors" ] && printf "%s" "$blue($co_authors)$reset"
}

print_commit() {
  printf "%s %s - %s %s %s%s\n" \
    "$cyan$commit_hash$reset" \
    "$yellow($date)$reset" \
    "$(print_branches)" \
    "$white$subject$reset" \
    "$green<$author>$reset" \
    "$(print_co_authors)"
}

parse_co_author() {
  case "$1" in
    *[Cc]o-[Aa]uthored-[Bb]y:*)
      author_name=${1#*[Bb]y: }
      author_name=${author_name%% <*}
      [ -z "$co_authors" ] && co_authors=$author_name || co_authors="$co_authors, $author_name"
      ;;
  esac
}

parse_line() {
  line=$1

  reset_ifs=$IFS
  IFS=$line_ifs
  set -- $line
  IFS=$reset_ifs

  commit_hash=${1#$begin_commit}
  date="$2"
  branches=$(printf "%s" "$3" | tr ',' "$branch_ifs")
  subject="$4"
  author="$5"
  [ -n "$6" ] && parse_co_author "$6"
}

parse_git_log() {
  while read -r line; do
    case "$line" in
      "$begin_commit"*)
        if [ -n "$commit_hash" ]; then
          print_commit
          commit_hash=""
          co_authors=""
        fi

        parse_line "$line"
        ;;
      *)
        parse_co_author "$line"
        ;;
    esac
  done

  print_commit
}

init_colors

git log \
  --no-notes \
  --no-decorate \
  --pretty=format:"$begin_commit%h${line_ifs}%as, %ar${line_ifs}%D${line_ifs}%s${line_ifs}%an${line_ifs}%b%n" |
  parse_git_log |
  less -RFX
"""
