# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import urllib.request
import os

# pinned release of the ucd (unicode character database: https://www.unicode.org/Public/16.0.0)
UNICODE_VERSION: str = '16.0.0'
UNICODE_BASE_URL: str = f'https://www.unicode.org/Public/{UNICODE_VERSION}'

UCD_FILES: dict[str, str] = {
	'UnicodeData': 'ucd/UnicodeData.txt',
	'DerivedCoreProperties': 'ucd/DerivedCoreProperties.txt',
	'EastAsianWidth': 'ucd/EastAsianWidth.txt',
	'GraphemeBreakProperty': 'ucd/auxiliary/GraphemeBreakProperty.txt',
	'EmojiData': 'ucd/emoji/emoji-data.txt',
	'CompositionExclusions': 'ucd/CompositionExclusions.txt',
	'CaseFolding': 'ucd/CaseFolding.txt'
}

# download all relevant files of the pinned release and return the mapping of the names to the local paths
def DownloadUCDFiles(refreshFiles: bool, baseUrl: str = UNICODE_BASE_URL, dirPath: str = './ucd') -> dict[str, str]:
	# check if the directory needs to be created
	if not os.path.isdir(dirPath):
		os.makedirs(dirPath)

	# download all of the files (only if they should either be refreshed, or do not exist yet)
	mapping = {}
	for file in UCD_FILES:
		url, path = f'{baseUrl}/{UCD_FILES[file]}', f'{dirPath}/{file}.txt'
		mapping[file] = path

		if not refreshFiles and os.path.isfile(path):
			print(f'skipping [{path}] as the file already exists (use --refresh to enforce a new download)')
			continue
		print(f'downloading [{url}] to [{path}]...')

		# download into a temporary file, as a partial file would otherwise be picked up as cached
		partPath = f'{path}.part'
		try:
			urllib.request.urlretrieve(url, partPath)
		except BaseException:
			if os.path.isfile(partPath):
				os.remove(partPath)
			raise
		os.replace(partPath, path)
	return mapping

def LoadUCDFiles(mapping: dict[str, str]) -> dict[str, str]:
	out = {}
	for name, path in mapping.items():
		print(f'Loading [{path}]...')
		with open(path, 'r', encoding='utf-8') as file:
			out[name] = file.read()
	return out
