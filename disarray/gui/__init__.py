"""Bitmap-font text helpers that draw through a caller-supplied sprite painter."""