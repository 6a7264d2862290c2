"""Canned pages used by the provider tests."""

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40
HASH_D = "d" * 40


# ---------------------------------------------------------------------------
# DarkMahou
# ---------------------------------------------------------------------------

DARKMAHOU_SEARCH = """
<html><body>
  <a href="https://darkmahou.org/?s=frieren" title="Sousou no Frieren">search</a>
  <a href="https://darkmahou.org/sousou-no-frieren-2/" title="Sousou no Frieren 2">Season 2</a>
  <a href="https://darkmahou.org/sousou-no-frieren/" title="Sousou no Frieren">Frieren</a>
  <a href="https://darkmahou.org/genero/fantasia/" title="Sousou no Frieren">Fantasia</a>
  <a href="https://darkmahou.org/tag/" title="Sousou no Frieren">Tag</a>
</body></html>
"""

DARKMAHOU_ANIME_PAGE = f"""
<html><body>
<div class="soraddl">
  <h3>Sousou no Frieren Episódio 3</h3>
  <div class="content"><table>
    <tr><td class="reso">1080p&gt;&gt;</td>
        <td><div class="slink"><a href="magnet:?xt=urn:btih:{HASH_A}&amp;dn=Frieren+03">Magnet</a></div></td></tr>
    <tr><td class="reso">720p</td>
        <td><div class="slink"><a href="magnet:?xt=urn:btih:{HASH_B}&amp;dn=Frieren+03">Magnet</a></div></td></tr>
    <tr><td class="reso">480p</td>
        <td><div class="slink"><a href="https://files.example/frieren-03.torrent">Torrent</a></div></td></tr>
  </table></div>
</div>
<div class="soraddl">
  <h3>Sousou no Frieren Episódio 01 ~ 12</h3>
  <div class="content"><table>
    <tr><td class="reso">1080p</td>
        <td><div class="slink"><a href="magnet:?xt=urn:btih:{HASH_C}&amp;dn=Frieren+Batch">Magnet</a></div></td></tr>
  </table></div>
</div>
</body></html>
"""

DARKMAHOU_RAW_MAGNETS = f"""
<html><body>
  <p>magnet:?xt=urn:btih:{HASH_D}&amp;dn=%5BSub%5D+Show+-+05+%5B720p%5D</p>
  <p>magnet:?xt=urn:btih:{HASH_D}&amp;dn=%5BSub%5D+Show+-+05+%5B720p%5D</p>
  <script>var m = "magnet:?xt=urn:btih:{HASH_A}";</script>
</body></html>
"""


# ---------------------------------------------------------------------------
# Q1N
# ---------------------------------------------------------------------------

Q1N_SEARCH = """
<html><body><div class="items">
  <div class="item">
    <div class="poster"><a href="https://q1n.net/animes/one-piece/"><img src="op.jpg"></a></div>
    <div class="data"><h3>One Piece</h3></div>
  </div>
  <div class="item">
    <div class="poster"><a href="https://q1n.net/animes/one-piece-dublado/"><img src="op.jpg"></a></div>
    <div class="data"><h3>One Piece Dublado</h3></div>
  </div>
  <div class="item"><div class="data"><h3>Without link</h3></div></div>
</div></body></html>
"""

Q1N_SEARCH_ARTICLES = """
<html><body>
  <article>
    <h2>Naruto</h2>
    <a href="https://q1n.net/blog/naruto-news/">News</a>
    <a href="https://q1n.net/animes/naruto/">Naruto</a>
  </article>
</body></html>
"""

Q1N_ANIME_PAGE = """
<html><body><ul class="episodios">
  <li><div class="numerando">1 - 2</div>
      <div class="episodiotitle"><a href="https://q1n.net/episodio/one-piece-episodio-2/">Episódio 2</a></div></li>
  <li><div class="numerando">1 - 1</div>
      <div class="episodiotitle"><a href="https://q1n.net/episodio/one-piece-episodio-1/">Episódio 1</a></div></li>
  <li><div class="numerando">7</div>
      <div class="episodiotitle"><a href="https://q1n.net/episodio/one-piece-especial/"></a></div></li>
  <li><div class="episodiotitle"></div></li>
</ul></body></html>
"""

Q1N_EPISODE_PAGE = """
<html><body>
  <iframe src="https://q1n.net/aviso/?url=https%3A%2F%2Fcsst.online%2Fembed%2F123"></iframe>
  <iframe src="https://www.blogger.com/video.g?token=abc"></iframe>
  <iframe src="https://ads.example/banner"></iframe>
</body></html>
"""

SECVIDEO_MP4 = "https://v1.secvideo1.online/get_file/1/abcdef/123/123.mp4/"

SECVIDEO_PLAYER = f"""
<html><script>
  var player = new Playerjs({{file: "{SECVIDEO_MP4}"}});
</script></html>
"""


# ---------------------------------------------------------------------------
# MangaLivre
# ---------------------------------------------------------------------------

MANGALIVRE_SEARCH = """
<html><body><div class="search-lists">
  <div class="manga__item">
    <div class="manga__thumb"><img data-src="//cdn.mangalivre.tv/dandadan.jpg" src="placeholder.gif"></div>
    <h2><a href="https://mangalivre.tv/manga/dandadan/">Dandadan</a></h2>
  </div>
  <div class="manga__item">
    <h2><a href="https://mangalivre.tv/novel/other/">Not a manga</a></h2>
  </div>
  <div class="manga__item"><h2>No link</h2></div>
</div></body></html>
"""

MANGALIVRE_CHAPTERS_AJAX = """
<ul>
  <li class="wp-manga-chapter"><a href="https://mangalivre.tv/manga/dandadan/capitulo-10/">Capítulo 10</a></li>
  <li class="wp-manga-chapter"><a href="https://mangalivre.tv/manga/dandadan/capitulo-2/">Capítulo 2</a></li>
  <li class="wp-manga-chapter"><a href="https://mangalivre.tv/manga/dandadan/capitulo-2-5/">Capitulo 2,5</a></li>
  <li class="wp-manga-chapter"><a href="https://mangalivre.tv/manga/dandadan/extra/">Extra</a></li>
</ul>
"""

MANGALIVRE_MANGA_PAGE = """
<html><body><div class="listing-chapters_wrap"><ul>
  <li class="wp-manga-chapter"><a href="https://mangalivre.tv/manga/dandadan/capitulo-1/">Cap. 1</a></li>
</ul></div></body></html>
"""

MANGALIVRE_READER = """
<html><body><div class="reading-content">
  <img data-src=" https://cdn.mangalivre.tv/1.jpg ">
  <img src="">
  <img src="https://cdn.mangalivre.tv/2.jpg">
</div></body></html>
"""
