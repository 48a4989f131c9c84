# License: BSD 3 clause
