import os, shutil, tempfile, posixpath

def create_repo(path, git_file=False):
    '''
    Creates a directory that looks like a git repo (a `.git` directory, or a `.git` file like worktrees have).
    '''
    os.makedirs(path, exist_ok=True)
    if git_file:
        with open(os.path.join(path, '.git'), 'w') as f:
            f.write('gitdir: /somewhere/else\n')
    else:
        os.makedirs(os.path.join(path, '.git'), exist_ok=True)
    return os.path.abspath(path)

def create_file(path, content='foobar'):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return os.path.abspath(path)

def read_bytes(path):
    with open(path, 'rb') as f:
        return f.read()

def registry_args(p):
    ''' Universal arguments pointing `gitf` at the work area's registry file. '''
    return ['--registry', os.path.join(p, 'registry.yaml')]

def set_workarea(tgt=None):
    '''
    Decorator to initialize test collateral under a fresh directory (a temporary one unless `tgt` is given).
    The decorated test receives the absolute path of an empty `.dut_local` directory.
    '''
    def wrap(f):
        def _wrap(*args, **kwargs):
            cwd = os.getcwd()
            base = os.path.abspath(tgt) if tgt else tempfile.mkdtemp(prefix='gitf_test_')
            local = os.path.join(base, '.dut_local')
            if os.path.exists(local):
                shutil.rmtree(local)
            os.makedirs(local)
            os.chdir(base)
            try:
                return f(local, *args, **kwargs)
            finally:
                os.chdir(cwd)
                shutil.rmtree(local if tgt else base)
        return _wrap
    return wrap

class FakeFilesystem:
    ''' In-memory stand-in for `gitf.LocalFilesystem`. Paths are POSIX and absolute. '''

    def __init__(self):
        self.dirs = {'/': set()}
        self.files = set()
        self.unreadable = set()

    def _add(self, path):
        path = posixpath.normpath(path)
        parent = posixpath.dirname(path)
        if parent not in self.dirs:
            self.mkdir(parent)
        self.dirs[parent].add(posixpath.basename(path))
        return path

    def mkdir(self, path):
        path = self._add(path)
        self.dirs.setdefault(path, set())
        return path

    def touch(self, path):
        self.files.add(self._add(path))
        return path

    def make_repo(self, path):
        self.mkdir(posixpath.join(path, '.git'))
        return posixpath.normpath(path)

    def exists(self, path):
        path = posixpath.normpath(path)
        return path in self.dirs or path in self.files

    def is_dir(self, path):
        return posixpath.normpath(path) in self.dirs

    def list_dir(self, path):
        path = posixpath.normpath(path)
        if path in self.unreadable:
            raise PermissionError(13, 'Permission denied', path)
        if path not in self.dirs:
            raise FileNotFoundError(2, 'No such file or directory', path)
        return list(self.dirs[path])

    def has_git(self, path):
        path = posixpath.normpath(path)
        if path in self.unreadable:
            raise PermissionError(13, 'Permission denied', path)
        return self.exists(posixpath.join(path, '.git'))
