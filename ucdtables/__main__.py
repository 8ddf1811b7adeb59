# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.generate import main

main()
