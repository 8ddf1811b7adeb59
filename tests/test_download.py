# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os
import pytest

from ucdtables import download
from ucdtables.download import DownloadUCDFiles, LoadUCDFiles, UCD_FILES

# -----------------------------------------------------------
# Helpers
# -----------------------------------------------------------

def fake_retrieve(calls):
	def retrieve(url, path):
		calls.append((url, path))
		with open(path, 'w', encoding='utf-8') as file:
			file.write(f'# {url}\n')
		return path, None
	return retrieve

def broken_retrieve(url, path):
	# leave a truncated file behind, as an interrupted transfer would
	with open(path, 'w', encoding='utf-8') as file:
		file.write('0041;LATIN CAP')
	raise OSError('connection reset')

# -----------------------------------------------------------
# Tests: Downloads
# -----------------------------------------------------------

def test_download_writes_all_files(tmp_path, monkeypatch):
	calls = []
	monkeypatch.setattr(download.urllib.request, 'urlretrieve', fake_retrieve(calls))
	dirPath = str(tmp_path / 'ucd')
	mapping = DownloadUCDFiles(False, 'https://example.org/16.0.0', dirPath)

	assert sorted(mapping) == sorted(UCD_FILES)
	assert len(calls) == len(UCD_FILES)
	for name, path in mapping.items():
		assert path == f'{dirPath}/{name}.txt'
		assert os.path.isfile(path)
		assert not os.path.exists(f'{path}.part')
	assert LoadUCDFiles(mapping)['UnicodeData'] == f'# https://example.org/16.0.0/{UCD_FILES["UnicodeData"]}\n'

def test_download_failure_leaves_no_cached_file(tmp_path, monkeypatch):
	monkeypatch.setattr(download.urllib.request, 'urlretrieve', broken_retrieve)
	dirPath = str(tmp_path / 'ucd')
	with pytest.raises(OSError, match='connection reset'):
		DownloadUCDFiles(False, 'https://example.org/16.0.0', dirPath)
	assert os.listdir(dirPath) == []

	# the next run must fetch the file again instead of skipping it as cached
	calls = []
	monkeypatch.setattr(download.urllib.request, 'urlretrieve', fake_retrieve(calls))
	DownloadUCDFiles(False, 'https://example.org/16.0.0', dirPath)
	assert len(calls) == len(UCD_FILES)

def test_download_skips_cached_files(tmp_path, monkeypatch):
	dirPath = tmp_path / 'ucd'
	dirPath.mkdir()
	for name in UCD_FILES:
		(dirPath / f'{name}.txt').write_text('cached', encoding='utf-8')
	monkeypatch.setattr(download.urllib.request, 'urlretrieve', lambda url, path: pytest.fail('cached file downloaded again'))
	mapping = DownloadUCDFiles(False, 'https://example.org/16.0.0', str(dirPath))
	assert LoadUCDFiles(mapping)['CaseFolding'] == 'cached'

def test_download_refresh_replaces_cached_files(tmp_path, monkeypatch):
	dirPath = tmp_path / 'ucd'
	dirPath.mkdir()
	(dirPath / 'UnicodeData.txt').write_text('stale', encoding='utf-8')
	calls = []
	monkeypatch.setattr(download.urllib.request, 'urlretrieve', fake_retrieve(calls))
	mapping = DownloadUCDFiles(True, 'https://example.org/16.0.0', str(dirPath))
	assert len(calls) == len(UCD_FILES)
	assert LoadUCDFiles(mapping)['UnicodeData'] != 'stale'
