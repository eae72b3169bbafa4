"""Kotlin rendition of the converter, handed out verbatim for copy/paste.

The source targets Kotlin Multiplatform with xmlutil for parsing. It follows
the Python engine: transform lists compose left to right, path data is
re-emitted as absolute M/L/C/Q/A/Z, sweep flags flip under mirroring
transforms, and hidden subtrees are dropped.
"""

from __future__ import annotations

KOTLIN_CONVERTER_SOURCE = r'''import kotlin.math.*
import nl.adaptivity.xmlutil.EventType
import nl.adaptivity.xmlutil.xmlStreaming

/**
 * SVG to Android VectorDrawable converter.
 *
 * Bakes every nested transform into absolute path data so the output needs no <group> elements.
 */

class SvgNode(
    val tag: String,
    val attributes: Map<String, String>,
    val children: MutableList<SvgNode> = mutableListOf(),
    var text: String = ""
) {
    operator fun get(name: String): String? = attributes[name]

    fun walk(): Sequence<SvgNode> = sequence {
        yield(this@SvgNode)
        children.forEach { yieldAll(it.walk()) }
    }
}

class SvgParseException(message: String) : IllegalArgumentException(message)

data class Matrix(
    val a: Double = 1.0, val b: Double = 0.0,
    val c: Double = 0.0, val d: Double = 1.0,
    val e: Double = 0.0, val f: Double = 0.0
) {
    val determinant: Double get() = a * d - b * c

    /** this x m: m is applied first. */
    fun multiply(m: Matrix) = Matrix(
        a * m.a + c * m.b, b * m.a + d * m.b,
        a * m.c + c * m.d, b * m.c + d * m.d,
        a * m.e + c * m.f + e, b * m.e + d * m.f + f
    )

    fun apply(x: Double, y: Double): Pair<Double, Double> =
        Pair(a * x + c * y + e, b * x + d * y + f)

    fun applyToArc(rx: Double, ry: Double, rotDeg: Double): Triple<Double, Double, Double> {
        val rad = rotDeg * PI / 180.0
        val ux = rx * cos(rad); val uy = rx * sin(rad)
        val vx = -ry * sin(rad); val vy = ry * cos(rad)
        val u2x = a * ux + c * uy; val u2y = b * ux + d * uy
        val v2x = a * vx + c * vy; val v2y = b * vx + d * vy
        return Triple(hypot(u2x, u2y), hypot(v2x, v2y), atan2(u2y, u2x) * 180.0 / PI)
    }

    companion object {
        fun translate(tx: Double, ty: Double = 0.0) = Matrix(e = tx, f = ty)
        fun scale(sx: Double, sy: Double = sx) = Matrix(a = sx, d = sy)
        fun rotate(deg: Double, cx: Double = 0.0, cy: Double = 0.0): Matrix {
            val r = deg * PI / 180.0
            val rot = Matrix(cos(r), sin(r), -sin(r), cos(r))
            return translate(cx, cy).multiply(rot).multiply(translate(-cx, -cy))
        }
        fun skewX(deg: Double) = Matrix(c = tan(deg * PI / 180.0))
        fun skewY(deg: Double) = Matrix(b = tan(deg * PI / 180.0))
    }
}

class BoundingBox {
    var minX = Double.POSITIVE_INFINITY; var minY = Double.POSITIVE_INFINITY
    var maxX = Double.NEGATIVE_INFINITY; var maxY = Double.NEGATIVE_INFINITY
    val isEmpty: Boolean get() = minX > maxX || minY > maxY
    val width: Double get() = if (isEmpty) 0.0 else maxX - minX
    val height: Double get() = if (isEmpty) 0.0 else maxY - minY

    fun add(x: Double, y: Double) {
        minX = min(minX, x); maxX = max(maxX, x)
        minY = min(minY, y); maxY = max(maxY, y)
    }
}

fun fmt(v: Double, precision: Int = 3): String {
    val factor = 10.0.pow(precision)
    val rounded = round(v * factor) / factor
    if (rounded == 0.0) return "0"
    val text = rounded.toString()
    return if (text.endsWith(".0")) text.dropLast(2) else text
}

private val numberRegex = Regex("[+-]?(?:\\d+\\.?\\d*|\\.\\d+)(?:[eE][+-]?\\d+)?")

fun parseNumbers(text: String?): List<Double> =
    if (text == null) emptyList() else numberRegex.findAll(text).map { it.value.toDouble() }.toList()

fun parseLength(text: String?, default: Double = 0.0): Double =
    text?.trim()?.let { numberRegex.find(it)?.takeIf { m -> m.range.first == 0 }?.value?.toDouble() } ?: default

fun parseOpacity(text: String?): Double {
    val t = text?.trim() ?: return 1.0
    val v = if (t.endsWith("%")) t.dropLast(1).toDoubleOrNull()?.div(100) else t.toDoubleOrNull()
    return (v ?: 1.0).coerceIn(0.0, 1.0)
}

fun parseTransform(source: String?): Matrix {
    var m = Matrix()
    if (source.isNullOrBlank()) return m
    Regex("([a-zA-Z]+)\\s*\\(([^)]*)\\)").findAll(source).forEach { match ->
        val args = parseNumbers(match.groupValues[2])
        val next = when (match.groupValues[1].lowercase()) {
            "translate" -> if (args.size in 1..2) Matrix.translate(args[0], args.getOrElse(1) { 0.0 }) else null
            "scale" -> if (args.size in 1..2) Matrix.scale(args[0], args.getOrElse(1) { args[0] }) else null
            "rotate" -> when (args.size) {
                1 -> Matrix.rotate(args[0])
                2 -> Matrix.rotate(args[0], args[1])
                3 -> Matrix.rotate(args[0], args[1], args[2])
                else -> null
            }
            "skewx" -> if (args.size == 1) Matrix.skewX(args[0]) else null
            "skewy" -> if (args.size == 1) Matrix.skewY(args[0]) else null
            "matrix" -> if (args.size == 6) Matrix(args[0], args[1], args[2], args[3], args[4], args[5]) else null
            else -> null
        }
        if (next != null) m = m.multiply(next)
    }
    return m
}

class PathFlattener(private val matrix: Matrix, private val precision: Int = 3) {
    val bbox = BoundingBox()
    private val out = mutableListOf<String>()
    private var curX = 0.0; private var curY = 0.0
    private var startX = 0.0; private var startY = 0.0
    private var lastCubic: Pair<Double, Double>? = null
    private var lastQuad: Pair<Double, Double>? = null

    private val argCounts = mapOf('M' to 2, 'L' to 2, 'H' to 1, 'V' to 1, 'C' to 6, 'S' to 4, 'Q' to 4, 'T' to 2, 'A' to 7, 'Z' to 0)

    private fun point(x: Double, y: Double): String {
        val (px, py) = matrix.apply(x, y)
        bbox.add(px, py)
        return "${fmt(px, precision)},${fmt(py, precision)}"
    }

    private fun tokenize(d: String): List<Any> {
        val tokens = mutableListOf<Any>()
        var cmd = ' '; var slot = 0; var i = 0
        while (i < d.length) {
            val ch = d[i]
            when {
                ch.isWhitespace() || ch == ',' -> i++
                ch.isLetter() -> { tokens.add(ch); cmd = ch.uppercaseChar(); slot = 0; i++ }
                cmd == 'A' && (slot % 7 == 3 || slot % 7 == 4) && (ch == '0' || ch == '1') -> {
                    tokens.add(if (ch == '1') 1.0 else 0.0); slot++; i++
                }
                else -> {
                    val m = numberRegex.find(d, i)
                    if (m == null || m.range.first != i) i++
                    else { tokens.add(m.value.toDouble()); slot++; i = m.range.last + 1 }
                }
            }
        }
        return tokens
    }

    fun flatten(d: String): String {
        val tokens = tokenize(d)
        var cmd: Char? = null
        var i = 0
        while (i < tokens.size) {
            val token = tokens[i]
            if (token is Char) {
                i++
                cmd = if (token.uppercaseChar() in argCounts) token else null
                if (cmd?.uppercaseChar() == 'Z') close()
                continue
            }
            val op = cmd
            if (op == null || op.uppercaseChar() == 'Z') { i++; continue }
            val count = argCounts.getValue(op.uppercaseChar())
            if (i + count > tokens.size || (i until i + count).any { tokens[it] !is Double }) {
                // Missing arguments: skip to the next command letter.
                while (i < tokens.size && tokens[i] !is Char) i++
                continue
            }
            val args = (i until i + count).map { tokens[it] as Double }
            i += count
            execute(op, args)
            if (op == 'M') cmd = 'L' else if (op == 'm') cmd = 'l'
        }
        return out.joinToString(" ")
    }

    private fun reflect(control: Pair<Double, Double>?): Pair<Double, Double> =
        control?.let { Pair(2 * curX - it.first, 2 * curY - it.second) } ?: Pair(curX, curY)

    private fun execute(cmd: Char, a: List<Double>) {
        val rel = cmd.isLowerCase()
        val ox = if (rel) curX else 0.0; val oy = if (rel) curY else 0.0
        val prevCubic = lastCubic; val prevQuad = lastQuad
        lastCubic = null; lastQuad = null
        var endX: Double; var endY: Double
        when (cmd.uppercaseChar()) {
            'M' -> { endX = a[0] + ox; endY = a[1] + oy; out.add("M" + point(endX, endY)); startX = endX; startY = endY }
            'L' -> { endX = a[0] + ox; endY = a[1] + oy; out.add("L" + point(endX, endY)) }
            'H' -> { endX = a[0] + ox; endY = curY; out.add("L" + point(endX, endY)) }
            'V' -> { endX = curX; endY = a[0] + oy; out.add("L" + point(endX, endY)) }
            'C' -> {
                endX = a[4] + ox; endY = a[5] + oy
                out.add("C" + point(a[0] + ox, a[1] + oy) + " " + point(a[2] + ox, a[3] + oy) + " " + point(endX, endY))
                lastCubic = Pair(a[2] + ox, a[3] + oy)
            }
            'S' -> {
                val c1 = reflect(prevCubic)
                endX = a[2] + ox; endY = a[3] + oy
                out.add("C" + point(c1.first, c1.second) + " " + point(a[0] + ox, a[1] + oy) + " " + point(endX, endY))
                lastCubic = Pair(a[0] + ox, a[1] + oy)
            }
            'Q' -> {
                endX = a[2] + ox; endY = a[3] + oy
                out.add("Q" + point(a[0] + ox, a[1] + oy) + " " + point(endX, endY))
                lastQuad = Pair(a[0] + ox, a[1] + oy)
            }
            'T' -> {
                val c1 = reflect(prevQuad)
                endX = a[0] + ox; endY = a[1] + oy
                out.add("Q" + point(c1.first, c1.second) + " " + point(endX, endY))
                lastQuad = c1
            }
            else -> {
                endX = a[5] + ox; endY = a[6] + oy
                val rx = abs(a[0]); val ry = abs(a[1])
                if (rx == 0.0 || ry == 0.0) {
                    out.add("L" + point(endX, endY))
                } else {
                    val (nrx, nry, rot) = matrix.applyToArc(rx, ry, a[2])
                    val large = if (a[3] != 0.0) 1 else 0
                    var sweep = if (a[4] != 0.0) 1 else 0
                    if (matrix.determinant < 0) sweep = 1 - sweep
                    out.add("A${fmt(nrx, precision)},${fmt(nry, precision)} ${fmt(rot, precision)} $large,$sweep " + point(endX, endY))
                }
            }
        }
        curX = endX; curY = endY
    }

    private fun close() {
        out.add("Z")
        curX = startX; curY = startY
        lastCubic = null; lastQuad = null
    }
}

object Shapes {
    private fun n(v: Double): String = if (v == floor(v)) v.toLong().toString() else v.toString()

    private fun ellipse(cx: Double, cy: Double, rx: Double, ry: Double) =
        "M${n(cx - rx)},${n(cy)} a${n(rx)},${n(ry)} 0 1,0 ${n(2 * rx)},0 a${n(rx)},${n(ry)} 0 1,0 ${n(-2 * rx)},0 Z"

    fun toPath(node: SvgNode): String? = when (node.tag) {
        "path" -> node["d"]
        "rect" -> {
            val x = parseLength(node["x"]); val y = parseLength(node["y"])
            val w = parseLength(node["width"]); val h = parseLength(node["height"])
            var rx = node["rx"]?.let { parseLength(it) }; var ry = node["ry"]?.let { parseLength(it) }
            if (rx == null) rx = ry ?: 0.0
            if (ry == null) ry = rx
            rx = rx.coerceIn(0.0, w / 2); ry = ry.coerceIn(0.0, h / 2)
            when {
                w <= 0 || h <= 0 -> null
                rx == 0.0 || ry == 0.0 -> "M${n(x)},${n(y)} h${n(w)} v${n(h)} h${n(-w)} z"
                else -> {
                    val arc = "A${n(rx)},${n(ry)} 0 0,1"
                    "M${n(x + rx)},${n(y)} H${n(x + w - rx)} $arc ${n(x + w)},${n(y + ry)} " +
                        "V${n(y + h - ry)} $arc ${n(x + w - rx)},${n(y + h)} " +
                        "H${n(x + rx)} $arc ${n(x)},${n(y + h - ry)} " +
                        "V${n(y + ry)} $arc ${n(x + rx)},${n(y)} Z"
                }
            }
        }
        "circle" -> parseLength(node["r"]).takeIf { it > 0 }?.let { ellipse(parseLength(node["cx"]), parseLength(node["cy"]), it, it) }
        "ellipse" -> {
            val rx = parseLength(node["rx"]); val ry = parseLength(node["ry"])
            if (rx > 0 && ry > 0) ellipse(parseLength(node["cx"]), parseLength(node["cy"]), rx, ry) else null
        }
        "line" -> "M${n(parseLength(node["x1"]))},${n(parseLength(node["y1"]))} L${n(parseLength(node["x2"]))},${n(parseLength(node["y2"]))}"
        "polyline", "polygon" -> {
            val v = parseNumbers(node["points"]).let { if (it.size % 2 == 1) it.dropLast(1) else it }
            if (v.isEmpty()) null else {
                val pts = v.chunked(2).map { "${n(it[0])},${n(it[1])}" }
                "M" + pts.first() + pts.drop(1).joinToString("") { " L$it" } + if (node.tag == "polygon") " Z" else ""
            }
        }
        else -> null
    }
}

object Colors {
    fun toArgb(value: String, opacity: Double = 1.0): String {
        val v = value.trim()
        var r: Int; var g: Int; var b: Int; var a = 1.0
        if (v.startsWith("#")) {
            var hex = v.drop(1)
            if (hex.length == 3 || hex.length == 4) hex = hex.map { "$it$it" }.joinToString("")
            if (hex.length == 6) hex += "ff"
            if (hex.length != 8 || hex.any { it.digitToIntOrNull(16) == null }) return v
            r = hex.substring(0, 2).toInt(16); g = hex.substring(2, 4).toInt(16); b = hex.substring(4, 6).toInt(16)
            a = hex.substring(6, 8).toInt(16) / 255.0
        } else if (v.lowercase().startsWith("rgb")) {
            val parts = v.substringAfter("(").substringBefore(")").split(Regex("[\\s,/]+")).filter { it.isNotEmpty() }
            if (parts.size !in 3..4) return v
            fun channel(p: String) = if (p.endsWith("%")) (p.dropLast(1).toDouble() / 100 * 255).roundToInt() else p.toDouble().roundToInt()
            r = channel(parts[0]).coerceIn(0, 255); g = channel(parts[1]).coerceIn(0, 255); b = channel(parts[2]).coerceIn(0, 255)
            if (parts.size == 4) a = parseOpacity(parts[3])
        } else {
            return v
        }
        val alpha = ((a * opacity).coerceIn(0.0, 1.0) * 255).roundToInt()
        return "#%02X%02X%02X%02X".format(alpha, r, g, b)
    }

    fun isNone(value: String?) = value == null || value.trim().lowercase() in setOf("none", "transparent")
}

class SvgToAndroidConverter(private val precision: Int = 3) {
    private val inherited = setOf(
        "fill", "fill-opacity", "fill-rule", "stroke", "stroke-opacity", "stroke-width",
        "stroke-linecap", "stroke-linejoin", "stroke-miterlimit", "color"
    )
    private val skipped = setOf(
        "defs", "style", "metadata", "title", "desc", "symbol", "clipPath", "mask", "marker",
        "pattern", "linearGradient", "radialGradient", "filter", "script"
    )
    private var classRules: Map<String, Map<String, String>> = emptyMap()
    private var gradients: Map<String, SvgNode> = emptyMap()
    private var usesGradients = false
    private var originX = 0.0; private var originY = 0.0

    fun convert(svgString: String): String {
        val root = createDocument(svgString)
        classRules = parseStylesheet(root.walk().filter { it.tag == "style" }.joinToString("\n") { it.text })
        gradients = root.walk().filter { it.tag == "linearGradient" || it.tag == "radialGradient" }
            .mapNotNull { node -> node["id"]?.let { it to node } }.toMap()
        usesGradients = false

        val vb = parseNumbers(root["viewBox"])
        val declaredW = root["width"]?.takeUnless { it.trim().endsWith("%") }?.let { parseLength(it) }?.takeIf { it > 0 }
        val declaredH = root["height"]?.takeUnless { it.trim().endsWith("%") }?.let { parseLength(it) }?.takeIf { it > 0 }
        val hasViewBox = vb.size == 4 && vb[2] > 0 && vb[3] > 0
        originX = if (hasViewBox) vb[0] else 0.0
        originY = if (hasViewBox) vb[1] else 0.0
        val vbW = if (hasViewBox) vb[2] else declaredW ?: 24.0
        val vbH = if (hasViewBox) vb[3] else declaredH ?: 24.0

        val body = StringBuilder()
        visit(root, Matrix.translate(-originX, -originY), emptyMap(), 1.0, body, isRoot = true)

        val result = StringBuilder()
        result.append("<vector\n    xmlns:android=\"http://schemas.android.com/apk/res/android\"\n")
        if (usesGradients) result.append("    xmlns:aapt=\"http://schemas.android.com/aapt\"\n")
        result.append("    android:width=\"${fmt(declaredW ?: vbW)}dp\"\n")
        result.append("    android:height=\"${fmt(declaredH ?: vbH)}dp\"\n")
        result.append("    android:viewportWidth=\"${fmt(vbW)}\"\n")
        result.append("    android:viewportHeight=\"${fmt(vbH)}\">\n")
        result.append(body)
        result.append("</vector>\n")
        return result.toString()
    }

    private fun parseDeclarations(text: String): Map<String, String> =
        text.split(";").mapNotNull { decl ->
            val parts = decl.split(":", limit = 2)
            if (parts.size < 2) null
            else parts[0].trim().lowercase() to parts[1].replace("!important", "").trim()
        }.filter { it.first.isNotEmpty() && it.second.isNotEmpty() }.toMap()

    private fun parseStylesheet(css: String): Map<String, Map<String, String>> {
        val rules = mutableMapOf<String, MutableMap<String, String>>()
        Regex("/\\*.*?\\*/", RegexOption.DOT_MATCHES_ALL).replace(css, "").split("}").forEach { block ->
            if (!block.contains("{")) return@forEach
            val declarations = parseDeclarations(block.substringAfter("{"))
            block.substringBefore("{").split(",").map { it.trim().removePrefix(".") }.filter { it.isNotEmpty() }
                .forEach { rules.getOrPut(it) { mutableMapOf() }.putAll(declarations) }
        }
        return rules
    }

    private fun resolveStyle(node: SvgNode): Map<String, String> {
        val style = mutableMapOf<String, String>()
        node["class"]?.split(Regex("\\s+"))?.forEach { classRules[it]?.let(style::putAll) }
        style.putAll(node.attributes)
        node["style"]?.let { style.putAll(parseDeclarations(it)) }
        return style
    }

    private fun visit(node: SvgNode, parent: Matrix, parentStyle: Map<String, String>, parentOpacity: Double, out: StringBuilder, isRoot: Boolean = false) {
        if (node.tag in skipped) return
        val own = resolveStyle(node)
        if (own["display"]?.trim() == "none") return
        if (own["opacity"] != null && parseOpacity(own["opacity"]) == 0.0) return

        var local = parseTransform(own["transform"])
        if (node.tag == "svg" && !isRoot) local = Matrix.translate(parseLength(node["x"]), parseLength(node["y"])).multiply(local)
        val matrix = parent.multiply(local)
        val style = parentStyle.filterKeys { it in inherited }.toMutableMap()
        own.forEach { (k, v) -> if (v.trim().lowercase() != "inherit") style[k] = v }
        val opacity = parentOpacity * parseOpacity(own["opacity"])

        when (node.tag) {
            "svg", "g", "a", "switch" -> node.children.forEach { visit(it, matrix, style, opacity, out) }
            else -> Shapes.toPath(node)?.let { appendPath(it, node, matrix, style, opacity, out) }
        }
    }

    private fun appendPath(d: String, node: SvgNode, matrix: Matrix, style: Map<String, String>, opacity: Double, out: StringBuilder) {
        val flattener = PathFlattener(matrix, precision)
        val pathData = flattener.flatten(d)
        if (pathData.isEmpty()) return

        val fillAlpha = opacity * parseOpacity(style["fill-opacity"])
        val strokeAlpha = opacity * parseOpacity(style["stroke-opacity"])
        val strokeWidth = parseLength(style["stroke-width"], 1.0) * sqrt(abs(matrix.determinant))
        val fill = if (fillAlpha > 0) paint(style["fill"] ?: "#000000", style, flattener.bbox) else null
        val stroke = if (strokeAlpha > 0 && strokeWidth > 0) paint(style["stroke"], style, flattener.bbox) else null
        if (fill == null && stroke == null) return

        val attrs = mutableListOf<String>()
        node["id"]?.let { attrs.add("android:name=\"$it\"") }
        attrs.add("android:pathData=\"$pathData\"")
        val blocks = mutableListOf<String>()
        if (fill != null) {
            if (fill.trimStart().startsWith("<")) blocks.add(aapt("fillColor", fill)) else attrs.add("android:fillColor=\"$fill\"")
            if (fillAlpha < 1) attrs.add("android:fillAlpha=\"${fmt(fillAlpha)}\"")
            if (style["fill-rule"]?.trim() == "evenodd") attrs.add("android:fillType=\"evenOdd\"")
        }
        if (stroke != null) {
            if (stroke.trimStart().startsWith("<")) blocks.add(aapt("strokeColor", stroke)) else attrs.add("android:strokeColor=\"$stroke\"")
            attrs.add("android:strokeWidth=\"${fmt(strokeWidth, precision)}\"")
            if (strokeAlpha < 1) attrs.add("android:strokeAlpha=\"${fmt(strokeAlpha)}\"")
            style["stroke-linecap"]?.trim()?.takeIf { it == "round" || it == "square" }?.let { attrs.add("android:strokeLineCap=\"$it\"") }
            style["stroke-linejoin"]?.trim()?.takeIf { it == "round" || it == "bevel" }?.let { attrs.add("android:strokeLineJoin=\"$it\"") }
            style["stroke-miterlimit"]?.let { attrs.add("android:strokeMiterLimit=\"${fmt(parseLength(it, 4.0), precision)}\"") }
        }
        out.append("    <path\n")
        out.append(attrs.joinToString("\n") { "        $it" })
        if (blocks.isEmpty()) {
            out.append("/>\n")
        } else {
            out.append(">\n")
            blocks.forEach { out.append(it) }
            out.append("    </path>\n")
        }
    }

    private fun aapt(target: String, gradient: String) =
        "        <aapt:attr name=\"android:$target\">\n$gradient        </aapt:attr>\n"

    /** Solid colour as #AARRGGBB, a <gradient> element, or null when nothing is painted. */
    private fun paint(raw: String?, style: Map<String, String>, bbox: BoundingBox): String? {
        if (Colors.isNone(raw)) return null
        var value = raw!!.trim()
        if (value.lowercase() == "currentcolor") value = style["color"] ?: "#000000"
        val url = Regex("^url\\(\\s*['\"]?#([^)'\"]+)['\"]?\\s*\\)\\s*(.*)$").find(value)
        if (url != null) {
            val chain = gradientChain(url.groupValues[1])
            if (chain.isEmpty()) return url.groupValues[2].takeIf { it.isNotBlank() }?.let { paint(it, style, bbox) }
            return gradient(chain, bbox)
        }
        val argb = Colors.toArgb(value)
        return if (argb.startsWith("#00")) null else argb
    }

    private fun gradientChain(id: String): List<SvgNode> {
        val chain = mutableListOf<SvgNode>()
        var ref: String? = id
        while (ref != null) {
            val node = gradients[ref] ?: break
            if (node in chain) break
            chain.add(node)
            ref = (node["href"] ?: node["xlink:href"])?.trim()?.removePrefix("#")
        }
        return chain
    }

    private fun gradient(chain: List<SvgNode>, bbox: BoundingBox): String? {
        fun inheritedAttr(name: String) = chain.firstNotNullOfOrNull { it[name]?.takeIf { v -> v.isNotBlank() } }
        val stopsNode = chain.firstOrNull { n -> n.children.any { it.tag == "stop" } }
        val stops = stopsNode?.children?.filter { it.tag == "stop" }?.map { stop ->
            val s = resolveStyle(stop)
            val raw = s["offset"]?.trim() ?: "0"
            val offset = (if (raw.endsWith("%")) raw.dropLast(1).toDoubleOrNull()?.div(100) else raw.toDoubleOrNull()) ?: 0.0
            offset.coerceIn(0.0, 1.0) to Colors.toArgb(s["stop-color"] ?: "#000000", parseOpacity(s["stop-opacity"]))
        }?.sortedBy { it.first } ?: emptyList()
        if (stops.isEmpty()) return null
        if (stops.size == 1) return stops[0].second

        val userSpace = inheritedAttr("gradientUnits") == "userSpaceOnUse"
        val minX = if (bbox.isEmpty) 0.0 else bbox.minX
        val minY = if (bbox.isEmpty) 0.0 else bbox.minY
        fun coordinate(name: String, default: String): Double {
            val raw = (inheritedAttr(name) ?: default).trim()
            val v = parseLength(raw, parseLength(default))
            val (offset, basis, shift) = when (name) {
                "x1", "x2", "cx" -> Triple(minX, bbox.width, -originX)
                "y1", "y2", "cy" -> Triple(minY, bbox.height, -originY)
                else -> Triple(0.0, hypot(bbox.width, bbox.height), 0.0)
            }
            return when {
                raw.endsWith("%") -> offset + v / 100 * basis
                userSpace -> v + shift
                else -> offset + v * basis
            }
        }

        usesGradients = true
        val linear = chain.first().tag == "linearGradient"
        val attrs = if (linear) listOf(
            "android:type=\"linear\"",
            "android:startX=\"${fmt(coordinate("x1", "0%"), precision)}\"",
            "android:startY=\"${fmt(coordinate("y1", "0%"), precision)}\"",
            "android:endX=\"${fmt(coordinate("x2", "100%"), precision)}\"",
            "android:endY=\"${fmt(coordinate("y2", "0%"), precision)}\""
        ) else listOf(
            "android:type=\"radial\"",
            "android:centerX=\"${fmt(coordinate("cx", "50%"), precision)}\"",
            "android:centerY=\"${fmt(coordinate("cy", "50%"), precision)}\"",
            "android:gradientRadius=\"${fmt(coordinate("r", "50%"), precision)}\""
        )
        val tileMode = when (inheritedAttr("spreadMethod")?.trim()) {
            "pad" -> "clamp"; "reflect" -> "mirror"; "repeat" -> "repeat"; else -> null
        }
        val sb = StringBuilder("            <gradient\n")
        sb.append((attrs + listOfNotNull(tileMode?.let { "android:tileMode=\"$it\"" })).joinToString("\n") { "                $it" })
        sb.append(">\n")
        stops.forEach { (offset, color) ->
            sb.append("                <item\n                    android:offset=\"${fmt(offset, precision)}\"\n")
            sb.append("                    android:color=\"$color\"/>\n")
        }
        sb.append("            </gradient>\n")
        return sb.toString()
    }

    private fun createDocument(xml: String): SvgNode {
        val reader = try {
            xmlStreaming.newReader(xml)
        } catch (e: Exception) {
            throw SvgParseException("Malformed SVG: ${e.message}")
        }
        val stack = mutableListOf<SvgNode>()
        var root: SvgNode? = null
        try {
            while (reader.hasNext()) {
                when (reader.next()) {
                    EventType.START_ELEMENT -> {
                        val attrs = linkedMapOf<String, String>()
                        for (k in 0 until reader.attributeCount) {
                            val prefix = if (reader.getAttributeNamespace(k) == "http://www.w3.org/1999/xlink") "xlink:" else ""
                            attrs[prefix + reader.getAttributeLocalName(k)] = reader.getAttributeValue(k)
                        }
                        val el = SvgNode(reader.localName, attrs)
                        if (stack.isEmpty()) root = el else stack.last().children.add(el)
                        stack.add(el)
                    }
                    EventType.TEXT, EventType.CDSECT -> stack.lastOrNull()?.let { it.text += reader.text }
                    EventType.END_ELEMENT -> if (stack.isNotEmpty()) stack.removeAt(stack.size - 1)
                    else -> {}
                }
            }
        } catch (e: Exception) {
            throw SvgParseException("Malformed SVG: ${e.message}")
        }
        val document = root ?: throw SvgParseException("Empty SVG document")
        return document.walk().firstOrNull { it.tag == "svg" } ?: throw SvgParseException("No <svg> element found")
    }
}
'''


def get_kotlin_converter_source() -> str:
    return KOTLIN_CONVERTER_SOURCE
