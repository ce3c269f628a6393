# daysheet/render/markup/layout_close.py
from __future__ import annotations

MARKUP = r"""
</div>
<div class="status" id="status" role="status"></div>
</div>
"""
