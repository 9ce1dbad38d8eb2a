#!/usr/bin/env python3

'''
# Gitfindr gitf CLI Utility

Keeps track of local git repositories under short aliases so they can be found
again without remembering their full paths.
'''

#ANCHOR: Native Dependencies
import os, sys, argparse, enum, re, datetime, tempfile, typing
from importlib import metadata


#ANCHOR: External Dependencies
import yaml


#ANCHOR: Globals
try:
    VERSION = metadata.version('gitfindr')
except metadata.PackageNotFoundError:
    VERSION = 'unknown'
DEFAULT_DEBUG_LEVEL = 0
DEBUG_LEVEL = DEFAULT_DEBUG_LEVEL
FORCE_COLORS = False
DEFAULT_REGISTRY_PATH = os.path.join(os.path.expanduser('~'), '.config', 'gitfindr', 'registry.yaml')
REGISTRY_FORMAT_VERSION = 1
BULK_ALIAS_SEPARATOR = '-'
PARSERS = {}
BUILDERS = {}


#ANCHOR: Errors
class GitfError(Exception):
    ''' Base class for all errors reported to the user by `gitf`. '''

class InvalidPath(GitfError):
    ''' Path does not exist or is not a git repository. '''

class InvalidDirectory(GitfError):
    ''' Bulk-add root does not exist or is not a directory. '''

class InvalidAlias(GitfError):
    ''' Alias is empty or blank. '''

class DuplicateAlias(GitfError):
    ''' Alias is already tracked. '''

class AliasNotFound(GitfError):
    ''' Alias is not tracked. '''

class CorruptStore(GitfError):
    ''' The registry file exists but cannot be parsed into valid entries. '''

class PersistenceError(GitfError):
    ''' The registry file could not be read or written. '''


#ANCHOR: Utility Types
class RepoState(enum.Enum):
    ''' Enumeration used to describe the on-disk state of a tracked repo. '''

    OK = 0
    ''' Path exists and contains a `.git` entry '''
    NOT_A_REPOSITORY = 1
    ''' Path exists but has no `.git` entry '''
    MISSING = 2
    ''' Path no longer exists '''

class Style(enum.Enum):
    ''' Enumeration used for text styles. '''

    BOLD    = enum.auto()
    GREEN   = enum.auto()
    RED     = enum.auto()
    YELLOW  = enum.auto()
    GRAY    = enum.auto()

class RepoEntry:
    ''' A single tracked repository. '''

    KEYS = ('path', 'added')

    def __init__(self, alias:str, path:str, added:typing.Optional[str]=None):
        self.alias = alias
        ''' Unique name of the repo '''
        self.path = path
        ''' Absolute path to the root of the repo '''
        self.added = added
        ''' ISO timestamp of when the repo started being tracked, if known '''

    def __eq__(self, other):
        if not isinstance(other, RepoEntry):
            return NotImplemented
        return self.alias == other.alias and self.path == other.path and self.added == other.added

    def __repr__(self):
        return f'RepoEntry({self.alias!r}, {self.path!r}, added={self.added!r})'

    def __str__(self):
        return f'{self.alias} -> {self.path}'

    def as_dict(self) -> dict:
        ''' Convertor method to dict representation (alias excluded, it is the key). '''
        return {x:getattr(self, x) for x in self.KEYS if getattr(self, x) is not None}

class Registry:
    ''' Internal representation of the alias to repo mapping. '''

    def __init__(self, entries:typing.Iterable[RepoEntry]=()):
        self.repos = {}
        ''' Alias to `RepoEntry` dictionary, in insertion order '''
        self.modified = False
        ''' Set once anything has been inserted or removed '''
        for entry in entries:
            self.repos[entry.alias] = entry

    def __getitem__(self, alias:str) -> RepoEntry:
        return self.repos[alias]

    def __contains__(self, alias:str) -> bool:
        return alias in self.repos

    def __iter__(self):
        return self.repos.__iter__()

    def __len__(self):
        return len(self.repos)

    def __eq__(self, other):
        if not isinstance(other, Registry):
            return NotImplemented
        return list(self.repos.items()) == list(other.repos.items())

    def insert(self, entry:RepoEntry):
        self.repos[entry.alias] = entry
        self.modified = True

    def pop(self, alias:str) -> RepoEntry:
        ans = self.repos.pop(alias)
        self.modified = True
        return ans

    def items(self):
        return self.repos.items()

    def as_dict(self) -> dict:
        ''' Convertor method to the dict representation written to disk. '''
        return {
            'version': REGISTRY_FORMAT_VERSION,
            'repos': {alias:entry.as_dict() for alias,entry in self.repos.items()},
        }

    @classmethod
    def from_dict(cls, raw:typing.Union[dict, None]) -> 'Registry':
        '''
        Parses the dict representation of a registry file.

        Args:
            raw: content of the registry file as loaded by `yaml.safe_load` (`None` for an empty file)

        Returns:
            A populated `Registry`.
        '''
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise CorruptStore(f"Expected a mapping at the top level, got {type(raw).__name__}")
        mystery_keys = set(raw.keys()) - {'version', 'repos'}
        if mystery_keys:
            raise CorruptStore(f"Unexpected top level keys: {sorted(str(x) for x in mystery_keys)}")
        version = raw.get('version', REGISTRY_FORMAT_VERSION)
        if not isinstance(version, int) or isinstance(version, bool) or version > REGISTRY_FORMAT_VERSION:
            raise CorruptStore(f"Unsupported registry format version '{version}'")
        repos = raw.get('repos')
        if repos is None:
            repos = {}
        if not isinstance(repos, dict):
            raise CorruptStore(f"Expected 'repos' to be a mapping, got {type(repos).__name__}")
        ans = cls()
        for alias,info in repos.items():
            if not isinstance(alias, str) or not alias.strip():
                raise CorruptStore(f"Invalid alias {alias!r}")
            if not isinstance(info, dict):
                raise CorruptStore(f"Entry '{alias}' is not a mapping")
            mystery_keys = set(info.keys()) - set(RepoEntry.KEYS)
            if mystery_keys:
                raise CorruptStore(f"Unexpected keys within definition of '{alias}': {sorted(str(x) for x in mystery_keys)}")
            path = info.get('path')
            if not isinstance(path, str) or not path:
                raise CorruptStore(f"Missing or invalid 'path' within definition of '{alias}'")
            added = info.get('added')
            if added is not None and not isinstance(added, str):
                raise CorruptStore(f"Invalid 'added' timestamp within definition of '{alias}'")
            ans.repos[alias] = RepoEntry(alias, path, added)
        return ans

class LocalFilesystem:
    ''' Filesystem access used by the handlers and the scanner. Swap for a fake in tests. '''

    def exists(self, path:str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path:str) -> bool:
        return os.path.isdir(path)

    def list_dir(self, path:str) -> typing.List[str]:
        return os.listdir(path)

    def has_git(self, path:str) -> bool:
        '''
        Returns whether `path` directly contains a `.git` entry (directory, or file for worktrees and submodules).

        Raises:
            OSError: if `path` cannot be inspected (e.g. permission denied)
        '''
        try:
            os.stat(os.path.join(path, '.git'))
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

LOCAL_FS = LocalFilesystem()


#ANCHOR: Utility Methods
def style(string:str, style_types:typing.Union[list, Style], force:bool=False, stream:typing.TextIO=None) -> str:
    '''
    Apply text styling to a given string. Does nothing if the target stream is not a terminal.

    Args:
        string: string to style
        style_types: a list of `Style` types to apply to `string`, or a single `Style` enum
        force: removes all existing styling prior to applying new style
        stream: stream the string will be written to (defaults to `stdout`)

    Returns:
        Styled string
    '''
    stream = stream or sys.stdout
    if not stream.isatty() and FORCE_COLORS != 'always':
        return string
    if force:
        string = re.sub(r'\033\[\d+m(.*?)\033\[0m', r'\1', string)
    if not isinstance(style_types, list):
        style_types = [style_types]
    codes = {
        Style.BOLD:     1,
        Style.GREEN:    92,
        Style.RED:      91,
        Style.YELLOW:   93,
        Style.GRAY:     97,
    }
    for style_type in style_types:
        string = f"\033[{codes[style_type]}m{string}\033[0m"
    return string

def debug(msg:str, level:int=0):
    '''
    Debug message print wrapper.

    Args:
        msg: message to print
        level: verbosity level of message
    '''
    if level <= DEBUG_LEVEL:
        _print(msg, sys.stdout)

def warning(msg:str):
    ''' Warning message print wrapper (stderr). '''
    _print(style(msg, Style.YELLOW, force=True, stream=sys.stderr), sys.stderr)

def error(msg:str):
    ''' Error message print wrapper (stderr). '''
    _print(style(msg, Style.RED, force=True, stream=sys.stderr), sys.stderr)

def _print(msg:str, stream:typing.TextIO):
    '''
    Prints `msg`, falling back to backslash escapes for file names that are not valid in the stream's
    encoding (undecodable bytes come back from `os.listdir` as lone surrogates).
    '''
    try:
        print(msg, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, 'encoding', None) or 'utf-8'
        msg = msg.encode('utf-8', 'surrogateescape').decode('utf-8', 'backslashreplace')
        print(msg.encode(encoding, 'backslashreplace').decode(encoding), file=stream)

def normalize_path(path:str) -> str:
    ''' Returns the absolute, user-expanded form of `path` without resolving symlinks. '''
    return os.path.abspath(os.path.expanduser(path))

def now() -> str:
    return datetime.datetime.now().replace(microsecond=0).isoformat()

def repo_state(entry:RepoEntry, fs:LocalFilesystem=None) -> RepoState:
    '''
    Checks whether a tracked repo still looks like a git repo.

    Args:
        entry: tracked repo
        fs: filesystem capability (defaults to the local filesystem)

    Returns:
        The `RepoState` of the repo's path.
    '''
    fs = fs or LOCAL_FS
    if not fs.exists(entry.path):
        return RepoState.MISSING
    try:
        return RepoState.OK if fs.is_dir(entry.path) and fs.has_git(entry.path) else RepoState.NOT_A_REPOSITORY
    except OSError:
        return RepoState.NOT_A_REPOSITORY


#ANCHOR: Registry Store
class RegistryStore:
    ''' Reads and writes the registry file. '''

    def __init__(self, path:str=None):
        '''
        Args:
            path: location of the registry file (defaults to `DEFAULT_REGISTRY_PATH`)
        '''
        self.path = normalize_path(path or DEFAULT_REGISTRY_PATH)

    def load(self) -> Registry:
        '''
        Reads the registry from disk. A missing file is a fresh, empty registry.

        Returns:
            The loaded `Registry`.
        '''
        if not os.path.exists(self.path):
            debug(f"No registry at {self.path}, starting empty", level=2)
            return Registry()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read registry {self.path}: {e}") from e
        try:
            raw = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise CorruptStore(f"Failed to parse registry {self.path} due to malformed syntax:\n{e}") from e
        try:
            ans = Registry.from_dict(raw)
        except CorruptStore as e:
            raise CorruptStore(f"Registry {self.path} is corrupt: {e}") from e
        debug(f"Loaded {len(ans)} repo(s) from {self.path}", level=2)
        return ans

    def dumps(self, registry:Registry) -> str:
        ''' Serializes `registry` to the text written to disk. '''
        return yaml.safe_dump(registry.as_dict(), sort_keys=False, default_flow_style=False, allow_unicode=True)

    def save(self, registry:Registry):
        '''
        Writes the whole registry to disk, replacing the previous file atomically.

        Args:
            registry: registry to write
        '''
        content = self.dumps(registry)
        parent = os.path.dirname(self.path)
        tmp = None
        try:
            os.makedirs(parent, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=parent, prefix='.registry.', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp is not None and os.path.exists(tmp):
                os.unlink(tmp)
            raise PersistenceError(f"Failed to write registry {self.path}: {e}") from e
        debug(f"Updated {self.path}", level=2)


#ANCHOR: Directory Scanner
def scan(root_dir:str, fs:LocalFilesystem=None, skipped:typing.List[typing.Tuple[str, str]]=None) -> typing.Iterator[typing.Tuple[str, str]]:
    '''
    Finds git repos among the immediate subdirectories of `root_dir` (no recursion).

    Args:
        root_dir: directory to scan
        fs: filesystem capability (defaults to the local filesystem)
        skipped: optional list which receives `(name, reason)` for every subdirectory that is not a candidate

    Returns:
        A lazy iterator of `(name, path)` tuples, `name` being the subdirectory's base name.
    '''
    fs = fs or LOCAL_FS
    root_dir = normalize_path(root_dir)
    if not fs.exists(root_dir):
        raise InvalidDirectory(f"Directory '{root_dir}' does not exist.")
    if not fs.is_dir(root_dir):
        raise InvalidDirectory(f"'{root_dir}' is not a directory.")
    try:
        names = sorted(fs.list_dir(root_dir))
    except OSError as e:
        raise InvalidDirectory(f"Unable to read directory '{root_dir}': {e}") from e
    if skipped is None:
        skipped = []

    def candidates():
        for name in names:
            path = os.path.join(root_dir, name)
            try:
                if not fs.is_dir(path):
                    continue
                if not fs.has_git(path):
                    skipped.append((name, 'not a git repository'))
                    debug(f"Skipping {path} (not a git repository)", level=1)
                    continue
            except OSError as e:
                skipped.append((name, str(e)))
                warning(f"Warning: unable to read {path}: {e}")
                continue
            yield name, path
    return candidates()


#ANCHOR: Command Handlers
class BulkAddResult:
    ''' Outcome of a bulk add. '''

    def __init__(self):
        self.added = []
        ''' `RepoEntry` objects inserted '''
        self.failures = []
        ''' `(alias, GitfError)` tuples for candidates that could not be inserted '''
        self.skipped = []
        ''' `(name, reason)` tuples for subdirectories that were not candidates '''

def add_repo(registry:Registry, alias:str, path:str, fs:LocalFilesystem=None, force:bool=False) -> RepoEntry:
    '''
    Starts tracking a repo.

    Args:
        registry: registry to insert into
        alias: unique name for the repo
        path: path to the root of the repo
        fs: filesystem capability (defaults to the local filesystem)
        force: replace an existing entry with the same alias instead of failing

    Returns:
        The inserted `RepoEntry`.
    '''
    fs = fs or LOCAL_FS
    path = normalize_path(path)
    if not alias or not alias.strip():
        raise InvalidAlias("An alias cannot be empty.")
    if not fs.exists(path):
        raise InvalidPath(f"The given path '{path}' does not exist.")
    try:
        is_repo = fs.is_dir(path) and fs.has_git(path)
    except OSError as e:
        raise InvalidPath(f"Unable to inspect '{path}': {e}") from e
    if not is_repo:
        raise InvalidPath(f"The given directory '{path}' is not a valid repository.")
    if alias in registry and not force:
        raise DuplicateAlias(f"The repository alias '{alias}' already exists ({registry[alias].path}).")
    entry = RepoEntry(alias, path, now())
    registry.insert(entry)
    return entry

def add_repos(registry:Registry, root_dir:str, prefix:str='', fs:LocalFilesystem=None, force:bool=False) -> BulkAddResult:
    '''
    Tracks every git repo directly under `root_dir`. Per-repo failures are collected rather than raised.

    Args:
        registry: registry to insert into
        root_dir: directory whose immediate subdirectories are scanned
        prefix: alias prefix; aliases are `<prefix>-<dirname>`, or just `<dirname>` without a prefix
        fs: filesystem capability (defaults to the local filesystem)
        force: replace existing entries with the same alias instead of failing

    Returns:
        A `BulkAddResult`.
    '''
    ans = BulkAddResult()
    for name,path in scan(root_dir, fs, skipped=ans.skipped):
        alias = f'{prefix}{BULK_ALIAS_SEPARATOR}{name}' if prefix else name
        try:
            ans.added.append(add_repo(registry, alias, path, fs, force))
        except GitfError as e:
            ans.failures.append((alias, e))
    return ans

def remove_repo(registry:Registry, alias:str) -> RepoEntry:
    '''
    Stops tracking a repo.

    Returns:
        The removed `RepoEntry`.
    '''
    if alias not in registry:
        raise AliasNotFound(f"The repository '{alias}' does not exist.")
    return registry.pop(alias)

def list_repos(registry:Registry) -> typing.List[typing.Tuple[str, str]]:
    return [(alias, entry.path) for alias,entry in registry.items()]

def show_repo(registry:Registry, alias:str) -> RepoEntry:
    if alias not in registry:
        raise AliasNotFound(f"The repository '{alias}' does not exist.")
    return registry[alias]


#ANCHOR: Commands
class Command:
    ''' Base class of parsed invocations. Subclasses are the one-per-operation variants. '''

    name = None

    def __init__(self):
        self.verbosity = DEFAULT_DEBUG_LEVEL
        self.color = None
        self.registry = None

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(f'{x}={y!r}' for x,y in self.__dict__.items())})"

    def run(self, registry:Registry, fs:LocalFilesystem) -> typing.Tuple[int, typing.Callable[[], None]]:
        '''
        Performs the operation on an already loaded registry. Nothing is printed here: the outcome is
        reported by the returned callable, which `execute` only calls once changes have been saved.

        Returns:
            A tuple of [0] exit code and [1] report function
        '''
        raise NotImplementedError

class AddCommand(Command):
    name = 'add'

    def __init__(self, alias:str, path:str, force:bool=False):
        super().__init__()
        self.alias = alias
        self.path = path
        self.force = force

    def run(self, registry, fs):
        alias = self.alias if self.alias is not None else os.path.basename(normalize_path(self.path))
        replaced = alias in registry
        entry = add_repo(registry, alias, self.path, fs, self.force)
        def report():
            debug(f"{'Replaced' if replaced else 'Added'} {style(entry.alias, Style.BOLD)} -> {entry.path}")
        return 0, report

class BulkAddCommand(Command):
    name = 'add'

    def __init__(self, prefix:str, dir:str, force:bool=False):
        super().__init__()
        self.prefix = prefix
        self.dir = dir
        self.force = force

    def run(self, registry, fs):
        result = add_repos(registry, self.dir, self.prefix or '', fs, self.force)
        rc = 1 if result.failures and not result.added else 0
        def report():
            for entry in result.added:
                debug(f"Added {style(entry.alias, Style.BOLD)} -> {entry.path}")
            for name,reason in result.skipped:
                debug(style(f"Skipped {name} ({reason})", Style.GRAY), level=1)
            for alias,e in result.failures:
                warning(f"Warning: could not add '{alias}': {e}")
            debug(f"{len(result.added)} added, {len(result.failures)} failed, {len(result.skipped)} skipped")
            if rc:
                error(f"No repositories were added from {self.dir}")
        return rc, report

class RemoveCommand(Command):
    name = 'remove'

    def __init__(self, alias:str):
        super().__init__()
        self.alias = alias

    def run(self, registry, fs):
        entry = remove_repo(registry, self.alias)
        def report():
            debug(f"Removed {style(entry.alias, Style.BOLD)} -> {entry.path}")
        return 0, report

class ListCommand(Command):
    name = 'list'

    def run(self, registry, fs):
        repos = list_repos(registry)
        def report():
            if not repos:
                debug("No repositories are being tracked.")
                return
            format_key = {
                RepoState.OK:               style('✓', Style.GREEN),
                RepoState.NOT_A_REPOSITORY: style('?', Style.YELLOW),
                RepoState.MISSING:          style('✗', Style.RED),
            }
            width = max(len(alias) for alias,_ in repos)
            for alias,path in repos:
                if DEBUG_LEVEL >= 1:
                    debug(f"{format_key[repo_state(registry[alias], fs)]} {style(alias.ljust(width), Style.BOLD)} -> {path}")
                else:
                    debug(f"{alias} -> {path}")
        return 0, report

class ShowCommand(Command):
    name = 'show'

    def __init__(self, alias:str):
        super().__init__()
        self.alias = alias

    def run(self, registry, fs):
        entry = show_repo(registry, self.alias)
        def report():
            debug(str(entry))
            debug(f"  added: {entry.added or 'unknown'}", level=1)
            debug(f"  state: {repo_state(entry, fs).name.lower().replace('_', ' ')}", level=1)
        return 0, report

class HelpCommand(Command):
    name = 'help'

    def __init__(self, query:typing.Optional[str]=None):
        super().__init__()
        self.query = query

    def run(self, registry, fs):
        if self.query is not None and self.query not in PARSERS:
            raise GitfError(f"Unknown gitf command '{self.query}' specified")
        return 0, lambda: print_help(self.query)

def parse_command(argv:typing.List[str]) -> Command:
    '''
    Parses command-line arguments into a `Command`.

    Args:
        argv: arguments following the program name, starting with the operation name

    Returns:
        The `Command` variant for the requested operation.
    '''
    argv = [x for x in argv]
    if not argv:
        return HelpCommand()
    name = argv.pop(0)
    if name in ('-h', '--help'):
        name = 'help'
    if name not in PARSERS:
        raise GitfError(f"Unknown gitf command '{name}' specified")
    args = PARSERS[name].parse_args(argv)
    ans = BUILDERS[name](args)
    ans.verbosity = args.verbosity
    ans.color = args.color
    ans.registry = args.registry
    return ans

def execute(command:Command, fs:LocalFilesystem=None) -> int:
    '''
    Runs one command as a single transaction: load, run, save if modified, then report.

    Args:
        command: parsed command
        fs: filesystem capability (defaults to the local filesystem)

    Returns:
        Exit code
    '''
    global DEBUG_LEVEL
    global FORCE_COLORS
    DEBUG_LEVEL = command.verbosity
    FORCE_COLORS = command.color or False
    if isinstance(command, HelpCommand):
        rc, report = command.run(None, fs or LOCAL_FS)
        report()
        return rc
    store = RegistryStore(command.registry)
    registry = store.load()
    rc, report = command.run(registry, fs or LOCAL_FS)
    if registry.modified:
        store.save(registry)
    report()
    return rc

def print_help(query:typing.Optional[str]=None):
    '''
    Prints the help message.

    Args:
        query: only print help for this operation
    '''
    if query is None:
        print(__doc__)
        print(f"## Operations\n")
    for name,p in PARSERS.items():
        if query is None or name == query:
            print(f'### {name}')
            print('\n    '.join(p.format_help().split('\n')).replace('usage: ', '', 1))


#ANCHOR: Operations
def gitf_operation(f):
    '''
    Decorator for all command-line operations of `gitf`. Registers an argument parser named after the
    operation, and `f` as the builder turning parsed arguments into a `Command`. The returned function
    runs the operation from a list of arguments, e.g. `add(['-a', 'proj', '-p', 'some/path'])`.
    '''
    name = f.__name__.rstrip('_')
    PARSERS[name] = argparse.ArgumentParser(formatter_class=argparse.RawTextHelpFormatter, prog=f'gitf {name}', add_help=True)
    BUILDERS[name] = f
    def wrapper(argv:typing.List[str]=None, fs:LocalFilesystem=None) -> int:
        return execute(parse_command([name] + list(argv or [])), fs)
    wrapper.__doc__ = f.__doc__
    wrapper.__name__ = f.__name__
    return wrapper


#ANCHOR: add()
@gitf_operation
def add(args):
    '''
    Start tracking a local git repository, or every git repository directly under a directory.
    '''
    if args.dir is not None:
        return BulkAddCommand(args.alias, args.dir, args.force)
    return AddCommand(args.alias, args.path, args.force)
PARSERS['add'].add_argument('--alias', '-a', '-alias', dest='alias', type=str, action='store', default=None, help='Alias of the repo (defaults to the directory name), or the alias prefix with --dir')
_group = PARSERS['add'].add_mutually_exclusive_group(required=True)
_group.add_argument('--path', '-p', '-path', dest='path', type=str, action='store', help='Path to the root of the repo')
_group.add_argument('--dir', '-d', dest='dir', type=str, action='store', help='Add every git repo found directly under this directory')
PARSERS['add'].add_argument('--force', '-f', dest='force', action='store_true', default=False, help='Replace existing repos with the same alias')


#ANCHOR: remove()
@gitf_operation
def remove(args):
    '''
    Stop tracking a repository.
    '''
    return RemoveCommand(args.name)
PARSERS['remove'].add_argument('--name', '-n', dest='name', type=str, action='store', required=True, help='Alias of the repo')


#ANCHOR: list()
@gitf_operation
def list_(args):
    '''
    Print all tracked repositories. Use -v to also show whether each one still exists.
    '''
    return ListCommand()


#ANCHOR: show()
@gitf_operation
def show(args):
    '''
    Print the path of a tracked repository. Use -v for details.
    '''
    return ShowCommand(args.name)
PARSERS['show'].add_argument('--name', '-n', dest='name', type=str, action='store', required=True, help='Alias of the repo')


#ANCHOR: help()
@gitf_operation
def help_(args):
    '''
    Prints the help message.
    '''
    return HelpCommand(args.query)
PARSERS['help'].add_argument('query', metavar='command', type=str, nargs='?', default=None, help='Operation to describe')


#ANCHOR: Universal Arguments
for name,p in PARSERS.items():
    p.add_argument('--verbosity', '-v', dest='verbosity', action='store', const=1, default=DEFAULT_DEBUG_LEVEL, nargs='?', type=int, help=argparse.SUPPRESS)
    p.add_argument('--color', dest='color', action='store', default=None, help=argparse.SUPPRESS)
    p.add_argument('--registry', dest='registry', type=str, action='store', default=None, help=argparse.SUPPRESS)
    p.description = (BUILDERS[name].__doc__ or '').strip()


#ANCHOR: Main
def main():
    argv = sys.argv[1:]
    if argv and argv[0] == '--version':
        print(VERSION)
        sys.exit(0)
    try:
        rc = execute(parse_command(argv))
    except GitfError as e:
        if DEBUG_LEVEL >= 3:
            raise
        error('Error: ' + str(e))
        sys.exit(1)
    sys.exit(rc)

if __name__ == '__main__':
    main()
