import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
for subdir in ('repository_after', 'evaluation'):
	path = os.path.join(ROOT, subdir)
	if path not in sys.path:
		sys.path.insert(0, path)
