"""Static text fragments stitched around the generated resource entries.

The header is built as HEADER_TOP + BANNER + HEADER_BOTTOM. The source is
built as the include line + BANNER + SOURCE_TOP + arrays + SOURCE_MIDDLE +
registrations + SOURCE_BOTTOM. BANNER always sits inside a block comment.
"""

HELP_TEXT = """
usage:
resources_compiler --sources=file1,file2 --output=full/path/to/file_without_extension
without supplying --sources param, an empty resources holder classes will be generated
once again, output file path with file name only - no extension please, because tool will use it as base for .h and .cpp files
note: spaces are not allowed in paths nor between the tags nor the equal signs!
"""

BANNER = r"""

      .:+oooooooooooooooooooooooooooooooooooooo: `/ooooooooooo/` :ooooo+/-`
   `+d##########################################sh#############do#########Ns.
  :#####N#ddddddddddddddddddddddddddddddN######h.:hdddddddddddh/.ydddd######N+
 :N###N+.        .-----------.`       `+#####d/   .-----------.        `:#####/
 h####/         :############Nd.    `/d#####+`   sN###########Ny         -#####
 h####/         :#N##########Nd.   :h####No`     oN###########Ny         -#####
 :N###No.`       `-----------.`  -yN###Ns.       `.-----------.`       `/#####/
  :#####N#####d/.yd##########do.sN#####################################N####N+
   `+d#########do#############N+###########################################s.
      .:+ooooo/` :+oooooooooo+. .+ooooooooooooooooooooooooooooooooooooo+/.

        C E Z E O  S O F T W A R E    R E S O U R C E S  C O M P I L E R
"""

HEADER_TOP = """#pragma once

/*"""

HEADER_BOTTOM = """
*/

#include <string>
#include <string_view>
#include <unordered_map>

namespace resources {

class manager final {
 public:
  manager();

  std::string_view get(const std::string_view& name) const;

 private:
  std::unordered_map<std::string_view, std::string_view> resources_;
};

}  // namespace resources
"""

SOURCE_INCLUDE = '#include "{header_name}"\n\n/*'

SOURCE_TOP = """
*/

namespace resources {
namespace {
// resources list

"""

SOURCE_MIDDLE = """// resources list

template <typename T, size_t size>
size_t array_size(T (&)[size]) {
  return size;
}

}  // namespace

manager::manager() {
  // resources list

"""

SOURCE_BOTTOM = """
  // resources list
}

std::string_view manager::get(const std::string_view& name) const {
  const auto iterator = resources_.find(name);
  if (iterator == resources_.end()) {
    return {};
  }
  return iterator->second;
}

}  // namespace resources
"""

ARRAY_OPEN = "constexpr const unsigned char {identifier}[{length}] = {{"
ARRAY_SEPARATOR = ","
ARRAY_CLOSE = "};\n\n"

REGISTRATION = (
    '  resources_["{identifier}"] = '
    "std::string_view(reinterpret_cast<const char*>({symbol}), "
    "array_size({symbol}));\n"
)
