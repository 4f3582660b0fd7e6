"""gh-labels: manage GitHub repository labels from the command line.

Labels can be copied between repositories through JSON templates, and AI
suggestions of labels and descriptions are available for pull requests and
issues. The console script entry point is `gh_labels.cli.cli:main`.
"""
